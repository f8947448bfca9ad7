"""Domain models for meals and meal items."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from uuid import UUID

from diet_tracker.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class Meal:
    """A logged meal; holds no nutrition of its own."""

    id: UUID
    user_id: UUID
    name: str
    meal_date: date
    meal_time: time
    registered_at: datetime
    description: str | None = None
    location: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FoodSource:
    """Meal item backed by a catalog food."""

    food_id: UUID
    kind = "food"


@dataclass(frozen=True)
class RecipeSource:
    """Meal item backed by a recipe."""

    recipe_id: UUID
    kind = "recipe"


ItemSource = FoodSource | RecipeSource


@dataclass(frozen=True)
class MealItem:
    """A food or recipe eaten in a meal, with its nutrition snapshot."""

    id: UUID
    meal_id: UUID
    source: ItemSource
    quantity: float
    unit: str
    nutrition: NutrientProfile
    observation: str | None = None
    created_at: datetime | None = None

    @property
    def item_type(self) -> str:
        return self.source.kind

    @property
    def food_id(self) -> UUID | None:
        return self.source.food_id if isinstance(self.source, FoodSource) else None

    @property
    def recipe_id(self) -> UUID | None:
        if isinstance(self.source, RecipeSource):
            return self.source.recipe_id
        return None
