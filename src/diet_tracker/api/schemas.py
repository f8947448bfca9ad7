"""Pydantic request models for the HTTP API."""

from datetime import date, time
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from diet_tracker.domain.goals import MacroType

Unit = Literal["g", "ml", "unit", "tablespoon", "teaspoon", "cup", "slice", "portion"]
RecipeCategory = Literal[
    "breakfast", "lunch", "dinner", "snack", "dessert", "beverage", "other"
]
Tag = Annotated[str, Field(min_length=1, max_length=20)]


class MealCreate(BaseModel):
    """Payload for creating a meal."""

    user_id: UUID
    name: str = Field(min_length=1, max_length=100)
    meal_date: date
    meal_time: time
    description: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    tags: list[Tag] = Field(default_factory=list, max_length=10)


class MealUpdate(BaseModel):
    """Payload for updating a meal."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    meal_date: date | None = None
    meal_time: time | None = None
    description: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    tags: list[Tag] | None = Field(default=None, max_length=10)


class MealItemCreate(BaseModel):
    """Payload for adding a food or recipe to a meal."""

    meal_id: UUID
    food_id: UUID | None = None
    recipe_id: UUID | None = None
    quantity: float = Field(gt=0)
    unit: Unit
    observation: str | None = Field(default=None, max_length=500)


class MealItemUpdate(BaseModel):
    """Payload for updating a meal item."""

    quantity: float | None = Field(default=None, gt=0)
    unit: Unit | None = None
    observation: str | None = Field(default=None, max_length=500)


class IngredientIn(BaseModel):
    """Recipe ingredient payload."""

    food_id: UUID
    quantity: float = Field(gt=0)
    unit: Unit


class RecipeCreate(BaseModel):
    """Payload for creating a recipe."""

    user_id: UUID
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    category: RecipeCategory
    servings: int = Field(ge=1, le=100)
    prep_time_minutes: int | None = Field(default=None, gt=0)
    ingredients: list[IngredientIn] = Field(min_length=1)
    instructions: str | None = None
    is_public: bool = False
    tags: list[Tag] = Field(default_factory=list, max_length=10)


class RecipeUpdate(BaseModel):
    """Payload for updating a recipe."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    category: RecipeCategory | None = None
    servings: int | None = Field(default=None, ge=1, le=100)
    prep_time_minutes: int | None = Field(default=None, gt=0)
    ingredients: list[IngredientIn] | None = Field(default=None, min_length=1)
    instructions: str | None = None
    is_public: bool | None = None
    tags: list[Tag] | None = Field(default=None, max_length=10)


class GoalCreate(BaseModel):
    """Payload for creating a dietary goal."""

    user_id: UUID
    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date | None = None
    calories_target: float = Field(gt=0, le=10000)
    protein_target: float | None = Field(default=None, ge=0)
    carbs_target: float | None = Field(default=None, ge=0)
    fat_target: float | None = Field(default=None, ge=0)
    fiber_target: float | None = Field(default=None, ge=0)
    macro_type: MacroType
    active: bool | None = None
    notes: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def check_date_range(self) -> "GoalCreate":
        """Ensure the end date is not before the start date."""
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class GoalUpdate(BaseModel):
    """Payload for updating a dietary goal."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    start_date: date | None = None
    end_date: date | None = None
    calories_target: float | None = Field(default=None, gt=0, le=10000)
    protein_target: float | None = Field(default=None, ge=0)
    carbs_target: float | None = Field(default=None, ge=0)
    fat_target: float | None = Field(default=None, ge=0)
    fiber_target: float | None = Field(default=None, ge=0)
    macro_type: MacroType | None = None
    active: bool | None = None
    notes: str | None = Field(default=None, max_length=500)
