"""Supabase repository for recipes."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.domain.recipes import Recipe, RecipeIngredient
from diet_tracker.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def get_by_id(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recipes(
        self,
        user_id: UUID | None,
        category: str | None,
        query: str | None,
        public_only: bool,
        limit: int,
    ) -> list[Recipe]:
        """Return recipes visible with the given filters."""
        request = self.client.table("recipes").select("*")
        if user_id is not None:
            request = request.or_(f"user_id.eq.{user_id},is_public.eq.true")
        elif public_only:
            request = request.eq("is_public", True)
        if category:
            request = request.eq("category", category)
        if query:
            request = request.ilike("name", f"%{query}%")
        response = request.order("created_at", desc=False).limit(limit).execute()
        return [_parse_recipe(row) for row in response.data or []]

    def upsert(self, recipe: Recipe) -> Recipe:
        """Insert or replace a recipe row."""
        response = self.client.table("recipes").upsert(_to_row(recipe)).execute()
        if not response.data:
            raise RuntimeError("Failed to save recipe")
        return _parse_recipe(response.data[0])

    def delete(self, recipe_id: UUID) -> bool:
        """Delete a recipe row."""
        response = (
            self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()
        )
        return bool(response.data)


def _to_row(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "user_id": str(recipe.user_id),
        "name": recipe.name,
        "description": recipe.description,
        "category": recipe.category,
        "servings": recipe.servings,
        "prep_time_minutes": recipe.prep_time_minutes,
        "ingredients": [
            {
                "food_id": str(ingredient.food_id),
                "quantity": ingredient.quantity,
                "unit": ingredient.unit,
            }
            for ingredient in recipe.ingredients
        ],
        "instructions": recipe.instructions,
        "totals": recipe.totals.as_dict(),
        "per_serving": recipe.per_serving.as_dict(),
        "is_public": recipe.is_public,
        "tags": recipe.tags,
        "created_at": recipe.created_at.isoformat(),
        "updated_at": recipe.updated_at.isoformat(),
    }


def _parse_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        category=str(row.get("category", "")),
        servings=int(row.get("servings", 1)),
        prep_time_minutes=row.get("prep_time_minutes"),
        ingredients=[
            RecipeIngredient(
                food_id=UUID(item["food_id"]),
                quantity=float(item["quantity"]),
                unit=str(item.get("unit") or "g"),
            )
            for item in row.get("ingredients") or []
        ],
        instructions=row.get("instructions"),
        totals=NutrientProfile.from_dict(row.get("totals") or {}),
        per_serving=NutrientProfile.from_dict(row.get("per_serving") or {}),
        is_public=bool(row.get("is_public", False)),
        tags=list(row.get("tags") or []),
        created_at=datetime.fromisoformat(row["created_at"]),
        updated_at=datetime.fromisoformat(row["updated_at"]),
    )
