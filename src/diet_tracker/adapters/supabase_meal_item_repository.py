"""Supabase repository for meal items."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.meals import FoodSource, MealItem, RecipeSource
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.services.meals import MealItemRepository


@dataclass
class SupabaseMealItemRepository(MealItemRepository):
    """Supabase implementation for meal items."""

    client: Client

    def get_by_id(self, item_id: UUID) -> MealItem | None:
        """Return a meal item by id."""
        response = (
            self.client.table("meal_items")
            .select("*")
            .eq("id", str(item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def list_by_meal(self, meal_id: UUID) -> list[MealItem]:
        """Return the items of a meal."""
        response = (
            self.client.table("meal_items")
            .select("*")
            .eq("meal_id", str(meal_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def upsert(self, item: MealItem) -> MealItem:
        """Insert or replace a meal item row."""
        row = {
            "id": str(item.id),
            "meal_id": str(item.meal_id),
            "food_id": str(item.food_id) if item.food_id else None,
            "recipe_id": str(item.recipe_id) if item.recipe_id else None,
            "item_type": item.item_type,
            "quantity": item.quantity,
            "unit": item.unit,
            "calculated_calories": item.nutrition.calories,
            "calculated_protein_g": item.nutrition.protein_g,
            "calculated_carbs_g": item.nutrition.carbs_g,
            "calculated_fat_g": item.nutrition.fat_g,
            "calculated_fiber_g": item.nutrition.fiber_g,
            "observation": item.observation,
        }
        if item.created_at is not None:
            row["created_at"] = item.created_at.isoformat()
        response = self.client.table("meal_items").upsert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to save meal item")
        return _parse_item(response.data[0])

    def delete(self, item_id: UUID) -> bool:
        """Delete a meal item row."""
        response = (
            self.client.table("meal_items").delete().eq("id", str(item_id)).execute()
        )
        return bool(response.data)


def _parse_item(row: dict[str, object]) -> MealItem:
    if row.get("recipe_id"):
        source = RecipeSource(UUID(row["recipe_id"]))
    else:
        source = FoodSource(UUID(row["food_id"]))
    return MealItem(
        id=UUID(row["id"]),
        meal_id=UUID(row["meal_id"]),
        source=source,
        quantity=float(row.get("quantity", 0.0)),
        unit=str(row.get("unit") or "g"),
        nutrition=NutrientProfile(
            calories=float(row.get("calculated_calories", 0.0)),
            protein_g=float(row.get("calculated_protein_g", 0.0)),
            carbs_g=float(row.get("calculated_carbs_g", 0.0)),
            fat_g=float(row.get("calculated_fat_g", 0.0)),
            fiber_g=float(row.get("calculated_fiber_g", 0.0)),
        ),
        observation=row.get("observation"),
        created_at=(
            datetime.fromisoformat(row["created_at"])
            if row.get("created_at")
            else None
        ),
    )
