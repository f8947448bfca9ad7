"""Meal item service resolving nutrition snapshots from foods and recipes."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from diet_tracker.domain.errors import (
    InvalidReference,
    ParentNotFound,
    ReferenceNotFound,
)
from diet_tracker.domain.meals import FoodSource, ItemSource, MealItem, RecipeSource
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.services.foods import FoodRepository
from diet_tracker.services.meals import MealItemRepository, MealRepository
from diet_tracker.services.recipes import RecipeRepository
from diet_tracker.services.scaling import (
    food_base_quantity,
    recipe_base_quantity,
    scale_profile,
)

_logger = logging.getLogger(__name__)


def item_source(food_id: UUID | None, recipe_id: UUID | None) -> ItemSource:
    """Build the item source, rejecting missing or ambiguous references."""
    if food_id is not None and recipe_id is not None:
        raise InvalidReference("Provide either food_id or recipe_id, not both")
    if food_id is not None:
        return FoodSource(food_id)
    if recipe_id is not None:
        return RecipeSource(recipe_id)
    raise InvalidReference("Either food_id or recipe_id must be provided")


@dataclass
class MealItemService:
    """Adds foods and recipes to meals with frozen nutrition snapshots."""

    repository: MealItemRepository
    meals: MealRepository
    foods: FoodRepository
    recipes: RecipeRepository

    def create_item(  # noqa: PLR0913
        self,
        meal_id: UUID,
        source: ItemSource,
        quantity: float,
        unit: str,
        observation: str | None = None,
    ) -> MealItem:
        """Resolve the source's nutrition for the quantity and persist the item."""
        if self.meals.get_by_id(meal_id) is None:
            raise ParentNotFound(meal_id)
        nutrition = self.resolve_nutrition(source, quantity, unit)
        item = MealItem(
            id=uuid4(),
            meal_id=meal_id,
            source=source,
            quantity=quantity,
            unit=unit,
            nutrition=nutrition,
            observation=observation,
            created_at=datetime.now(tz=UTC),
        )
        return self.repository.upsert(item)

    def list_items(self, meal_id: UUID) -> list[MealItem]:
        """Return the items of a meal."""
        return self.repository.list_by_meal(meal_id)

    def get_item(self, item_id: UUID) -> MealItem:
        """Return a meal item or raise ReferenceNotFound."""
        item = self.repository.get_by_id(item_id)
        if item is None:
            raise ReferenceNotFound("meal item", item_id)
        return item

    def update_item(self, item_id: UUID, payload: dict[str, object]) -> MealItem:
        """Update quantity, unit or observation of an item.

        A quantity or unit change re-scales from the source's current profile;
        otherwise the stored snapshot is kept as is.
        """
        current = self.get_item(item_id)
        quantity = float(payload.get("quantity") or current.quantity)
        unit = str(payload.get("unit") or current.unit)
        changes: dict[str, object] = {"quantity": quantity, "unit": unit}
        if "observation" in payload:
            changes["observation"] = payload["observation"]
        if quantity != current.quantity or unit != current.unit:
            changes["nutrition"] = self.resolve_nutrition(
                current.source, quantity, unit
            )
        return self.repository.upsert(replace(current, **changes))

    def delete_item(self, item_id: UUID) -> None:
        """Delete a meal item or raise ReferenceNotFound."""
        if not self.repository.delete(item_id):
            raise ReferenceNotFound("meal item", item_id)

    def resolve_nutrition(
        self, source: ItemSource, quantity: float, unit: str
    ) -> NutrientProfile:
        """Scale the referenced food or recipe serving to the quantity."""
        if isinstance(source, FoodSource):
            food = self.foods.get_by_id(source.food_id)
            if food is None:
                _logger.warning("Meal item food missing: food_id=%s", source.food_id)
                raise ReferenceNotFound("food", source.food_id)
            grams = food_base_quantity(food, quantity, unit)
            return scale_profile(food.nutrients, grams)
        recipe = self.recipes.get_by_id(source.recipe_id)
        if recipe is None:
            _logger.warning(
                "Meal item recipe missing: recipe_id=%s", source.recipe_id
            )
            raise ReferenceNotFound("recipe", source.recipe_id)
        return scale_profile(recipe.per_serving, recipe_base_quantity(quantity, unit))
