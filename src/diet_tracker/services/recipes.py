"""Recipe service with nutrition aggregation."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import InvalidQuantity, ReferenceNotFound
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.domain.recipes import Recipe, RecipeIngredient, RecipeNutrition
from diet_tracker.services.foods import FoodRepository
from diet_tracker.services.scaling import food_base_quantity, scale_profile

_logger = logging.getLogger(__name__)

_DETAIL_FIELDS = (
    "name",
    "category",
    "description",
    "prep_time_minutes",
    "instructions",
    "is_public",
    "tags",
)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def get_by_id(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_recipes(
        self,
        user_id: UUID | None,
        category: str | None,
        query: str | None,
        public_only: bool,
        limit: int,
    ) -> list[Recipe]:
        """Return recipes visible with the given filters."""

    def upsert(self, recipe: Recipe) -> Recipe:
        """Insert or replace a recipe and return it."""

    def delete(self, recipe_id: UUID) -> bool:
        """Delete a recipe; return False if it did not exist."""


def compute_recipe_nutrition(
    foods: FoodRepository,
    ingredients: list[RecipeIngredient],
    servings: float,
) -> RecipeNutrition:
    """Sum scaled ingredient nutrients and derive per-serving values.

    Every ingredient food must exist; a missing one raises ReferenceNotFound
    before anything is returned, so callers never persist a partial recipe.
    """
    if servings <= 0:
        raise InvalidQuantity(f"Servings must be positive, got {servings}")
    totals = NutrientProfile.zero()
    for ingredient in ingredients:
        food = foods.get_by_id(ingredient.food_id)
        if food is None:
            raise ReferenceNotFound("food", ingredient.food_id)
        grams = food_base_quantity(food, ingredient.quantity, ingredient.unit)
        totals = totals + scale_profile(food.nutrients, grams)
    return RecipeNutrition(totals=totals, per_serving=totals.multiply(1 / servings))


@dataclass
class RecipeService:
    """Application service for recipes."""

    repository: RecipeRepository
    foods: FoodRepository

    def create_recipe(self, user_id: UUID, payload: dict[str, object]) -> Recipe:
        """Compute nutrition for a new recipe and persist it."""
        ingredients = parse_ingredients(payload.get("ingredients") or [])
        servings = int(payload["servings"])
        nutrition = compute_recipe_nutrition(self.foods, ingredients, servings)
        now = datetime.now(tz=UTC)
        recipe = Recipe(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            category=str(payload["category"]),
            servings=servings,
            ingredients=ingredients,
            totals=nutrition.totals,
            per_serving=nutrition.per_serving,
            created_at=now,
            updated_at=now,
            description=payload.get("description"),
            prep_time_minutes=payload.get("prep_time_minutes"),
            instructions=payload.get("instructions"),
            is_public=bool(payload.get("is_public", False)),
            tags=list(payload.get("tags") or []),
        )
        return self.repository.upsert(recipe)

    def get_recipe(self, recipe_id: UUID) -> Recipe:
        """Return a recipe or raise ReferenceNotFound."""
        recipe = self.repository.get_by_id(recipe_id)
        if recipe is None:
            raise ReferenceNotFound("recipe", recipe_id)
        return recipe

    def list_recipes(  # noqa: PLR0913
        self,
        user_id: UUID | None = None,
        category: str | None = None,
        query: str | None = None,
        public_only: bool = False,
        limit: int = 50,
    ) -> list[Recipe]:
        """List the user's own and public recipes, or public ones only."""
        return self.repository.list_recipes(
            user_id=user_id,
            category=category,
            query=query,
            public_only=public_only,
            limit=limit,
        )

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Apply an update, recomputing nutrition if ingredients or servings change."""
        current = self.get_recipe(recipe_id)
        changes: dict[str, object] = {
            key: payload[key] for key in _DETAIL_FIELDS if key in payload
        }
        if "tags" in changes:
            changes["tags"] = list(changes["tags"] or [])
        if "ingredients" in payload or "servings" in payload:
            ingredients = (
                parse_ingredients(payload["ingredients"] or [])
                if "ingredients" in payload
                else current.ingredients
            )
            servings = (
                int(payload["servings"])
                if payload.get("servings") is not None
                else current.servings
            )
            nutrition = compute_recipe_nutrition(self.foods, ingredients, servings)
            changes.update(
                ingredients=ingredients,
                servings=servings,
                totals=nutrition.totals,
                per_serving=nutrition.per_serving,
            )
            _logger.info(
                "Recomputed recipe nutrition: recipe_id=%s calories=%.1f",
                recipe_id,
                nutrition.totals.calories,
            )
        updated = replace(current, **changes, updated_at=datetime.now(tz=UTC))
        return self.repository.upsert(updated)

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe or raise ReferenceNotFound."""
        if not self.repository.delete(recipe_id):
            raise ReferenceNotFound("recipe", recipe_id)


def parse_ingredients(raw: list[object]) -> list[RecipeIngredient]:
    """Build ingredient models from request dicts."""
    ingredients: list[RecipeIngredient] = []
    for item in raw:
        if isinstance(item, RecipeIngredient):
            ingredients.append(item)
            continue
        food_id = item["food_id"]
        ingredients.append(
            RecipeIngredient(
                food_id=food_id if isinstance(food_id, UUID) else UUID(str(food_id)),
                quantity=float(item["quantity"]),
                unit=str(item.get("unit") or "g"),
            )
        )
    return ingredients
