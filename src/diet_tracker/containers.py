"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.memory_repositories import (
    InMemoryFoodRepository,
    InMemoryGoalRepository,
    InMemoryMealItemRepository,
    InMemoryMealRepository,
    InMemoryRecipeRepository,
)
from diet_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from diet_tracker.adapters.supabase_meal_item_repository import (
    SupabaseMealItemRepository,
)
from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.dashboard import DashboardService
from diet_tracker.services.foods import FoodRepository, FoodService
from diet_tracker.services.goals import GoalRepository, GoalService
from diet_tracker.services.meal_items import MealItemService
from diet_tracker.services.meals import (
    MealItemRepository,
    MealRepository,
    MealService,
)
from diet_tracker.services.recipes import RecipeRepository, RecipeService


@dataclass
class Repositories:
    """Storage collaborators used by the services."""

    foods: FoodRepository
    recipes: RecipeRepository
    meals: MealRepository
    meal_items: MealItemRepository
    goals: GoalRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    recipe_service: RecipeService
    meal_service: MealService
    meal_item_service: MealItemService
    goal_service: GoalService
    dashboard_service: DashboardService


def build_repositories(settings: Settings) -> Repositories:
    """Create repositories for the configured storage backend."""
    if settings.storage_backend == "supabase":
        url, key = settings.supabase_credentials()
        client = create_client(url, key)
        return Repositories(
            foods=SupabaseFoodRepository(client),
            recipes=SupabaseRecipeRepository(client),
            meals=SupabaseMealRepository(client),
            meal_items=SupabaseMealItemRepository(client),
            goals=SupabaseGoalRepository(client),
        )
    return Repositories(
        foods=InMemoryFoodRepository.seeded(),
        recipes=InMemoryRecipeRepository(),
        meals=InMemoryMealRepository(),
        meal_items=InMemoryMealItemRepository(),
        goals=InMemoryGoalRepository(),
    )


def build_container(
    settings: Settings | None = None, repositories: Repositories | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repos = repositories or build_repositories(resolved_settings)
    goal_service = GoalService(repos.goals)
    return AppContainer(
        settings=resolved_settings,
        food_service=FoodService(repos.foods),
        recipe_service=RecipeService(repository=repos.recipes, foods=repos.foods),
        meal_service=MealService(
            repository=repos.meals, item_repository=repos.meal_items
        ),
        meal_item_service=MealItemService(
            repository=repos.meal_items,
            meals=repos.meals,
            foods=repos.foods,
            recipes=repos.recipes,
        ),
        goal_service=goal_service,
        dashboard_service=DashboardService(
            meals=repos.meals,
            items=repos.meal_items,
            goals=goal_service,
            timezone_name=resolved_settings.timezone,
        ),
    )
