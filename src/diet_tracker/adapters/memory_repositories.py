"""In-memory repositories used when no database is configured."""

from dataclasses import dataclass, field
from datetime import date
from uuid import NAMESPACE_URL, UUID, uuid5

from diet_tracker.domain.foods import Food
from diet_tracker.domain.goals import Goal
from diet_tracker.domain.meals import Meal, MealItem
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.domain.recipes import Recipe
from diet_tracker.services.foods import FoodRepository
from diet_tracker.services.goals import GoalRepository
from diet_tracker.services.meals import MealItemRepository, MealRepository
from diet_tracker.services.recipes import RecipeRepository


def _seed_id(slug: str) -> UUID:
    return uuid5(NAMESPACE_URL, f"diet-tracker/food/{slug}")


SEED_FOODS = [
    Food(
        id=_seed_id("arroz-branco-cozido"),
        name="Arroz Branco Cozido",
        category="Grãos",
        subcategory="Cereais",
        nutrients=NutrientProfile(
            calories=130, protein_g=2.7, carbs_g=28.2, fat_g=0.3, fiber_g=0.4
        ),
        vitamins={"vitamin_a": 0, "vitamin_c": 0},
        minerals={"calcium": 10, "iron": 0.2, "sodium": 1},
        data_source="TACO",
        conversion_factors={"g": 1, "cup": 158},
        tags=["cereal", "carboidrato"],
    ),
    Food(
        id=_seed_id("frango-grelhado"),
        name="Frango Grelhado",
        category="Proteínas",
        subcategory="Aves",
        nutrients=NutrientProfile(
            calories=165, protein_g=31, carbs_g=0, fat_g=3.6, fiber_g=0
        ),
        vitamins={"vitamin_a": 21, "vitamin_c": 0},
        minerals={"calcium": 15, "iron": 1.3, "sodium": 82},
        data_source="USDA",
        conversion_factors={"g": 1, "unit": 120},
        tags=["proteína", "carne"],
    ),
    Food(
        id=_seed_id("banana"),
        name="Banana",
        category="Frutas",
        subcategory="Frutas Tropicais",
        nutrients=NutrientProfile(
            calories=89, protein_g=1.1, carbs_g=22.8, fat_g=0.3, fiber_g=2.6
        ),
        vitamins={"vitamin_a": 64, "vitamin_c": 8.7},
        minerals={"calcium": 5, "iron": 0.3, "sodium": 1},
        data_source="TACO",
        conversion_factors={"g": 1, "unit": 118},
        tags=["fruta", "potássio"],
    ),
]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """Dict-backed food catalog."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    @classmethod
    def seeded(cls) -> "InMemoryFoodRepository":
        """Create a catalog holding the reference foods."""
        return cls(foods={food.id: food for food in SEED_FOODS})

    def add(self, food: Food) -> Food:
        """Add a food to the catalog."""
        self.foods[food.id] = food
        return food

    def get_by_id(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def search(
        self,
        query: str | None,
        category: str | None,
        tags: list[str],
        limit: int,
    ) -> list[Food]:
        results = [food for food in self.foods.values() if food.is_public]
        if query:
            needle = query.lower()
            results = [food for food in results if needle in food.name.lower()]
        if category:
            results = [food for food in results if food.category == category]
        if tags:
            results = [
                food
                for food in results
                if any(tag.lower() in tags for tag in food.tags)
            ]
        return results[:limit]


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """Dict-backed recipe store."""

    recipes: dict[UUID, Recipe] = field(default_factory=dict)

    def get_by_id(self, recipe_id: UUID) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def list_recipes(
        self,
        user_id: UUID | None,
        category: str | None,
        query: str | None,
        public_only: bool,
        limit: int,
    ) -> list[Recipe]:
        results = list(self.recipes.values())
        if user_id is not None:
            results = [r for r in results if r.user_id == user_id or r.is_public]
        elif public_only:
            results = [r for r in results if r.is_public]
        if category:
            results = [r for r in results if r.category == category]
        if query:
            needle = query.lower()
            results = [r for r in results if needle in r.name.lower()]
        return results[:limit]

    def upsert(self, recipe: Recipe) -> Recipe:
        self.recipes[recipe.id] = recipe
        return recipe

    def delete(self, recipe_id: UUID) -> bool:
        return self.recipes.pop(recipe_id, None) is not None


@dataclass
class InMemoryMealRepository(MealRepository):
    """Dict-backed meal store."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def get_by_id(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def list_by_user_and_date_range(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[Meal]:
        results = [
            meal
            for meal in self.meals.values()
            if meal.user_id == user_id
            and (start is None or meal.meal_date >= start)
            and (end is None or meal.meal_date <= end)
        ]
        return sorted(results, key=lambda meal: (meal.meal_date, meal.meal_time))

    def upsert(self, meal: Meal) -> Meal:
        self.meals[meal.id] = meal
        return meal

    def delete(self, meal_id: UUID) -> bool:
        return self.meals.pop(meal_id, None) is not None


@dataclass
class InMemoryMealItemRepository(MealItemRepository):
    """Dict-backed meal item store."""

    items: dict[UUID, MealItem] = field(default_factory=dict)

    def get_by_id(self, item_id: UUID) -> MealItem | None:
        return self.items.get(item_id)

    def list_by_meal(self, meal_id: UUID) -> list[MealItem]:
        return [item for item in self.items.values() if item.meal_id == meal_id]

    def upsert(self, item: MealItem) -> MealItem:
        self.items[item.id] = item
        return item

    def delete(self, item_id: UUID) -> bool:
        return self.items.pop(item_id, None) is not None


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """Dict-backed goal store."""

    goals: dict[UUID, Goal] = field(default_factory=dict)

    def get_by_id(self, goal_id: UUID) -> Goal | None:
        return self.goals.get(goal_id)

    def list_by_user(self, user_id: UUID, active_only: bool = False) -> list[Goal]:
        return [
            goal
            for goal in self.goals.values()
            if goal.user_id == user_id and (goal.active or not active_only)
        ]

    def upsert(self, goal: Goal) -> Goal:
        self.goals[goal.id] = goal
        return goal
