"""Domain models for recipes."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from diet_tracker.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class RecipeIngredient:
    """A food used in a recipe with its quantity."""

    food_id: UUID
    quantity: float
    unit: str


@dataclass(frozen=True)
class RecipeNutrition:
    """Recipe totals and the per-serving share."""

    totals: NutrientProfile
    per_serving: NutrientProfile


@dataclass(frozen=True)
class Recipe:
    """A user recipe with derived nutrition."""

    id: UUID
    user_id: UUID
    name: str
    category: str
    servings: int
    ingredients: list[RecipeIngredient]
    totals: NutrientProfile
    per_serving: NutrientProfile
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    prep_time_minutes: int | None = None
    instructions: str | None = None
    is_public: bool = False
    tags: list[str] = field(default_factory=list)
