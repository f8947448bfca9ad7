"""Food catalog and recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, status

from diet_tracker.api.schemas import RecipeCreate, RecipeUpdate  # noqa: TC001
from diet_tracker.api.serializers import food_to_dict, recipe_to_dict, success

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(tags=["catalog"])


@router.get("/food")
async def search_foods(
    request: Request,
    query: str | None = None,
    category: str | None = None,
    tags: str | None = None,
    limit: int = Query(default=50, ge=1, le=100),
) -> dict[str, object]:
    """Search public foods."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.search(
        query=query, category=category, tags=tags, limit=limit
    )
    return success([food_to_dict(food) for food in foods])


@router.get("/food/{food_id}")
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    """Return a food."""
    container: AppContainer = request.app.state.container
    return success(food_to_dict(container.food_service.get_food(food_id)))


@router.post("/recipe", status_code=status.HTTP_201_CREATED)
async def create_recipe(body: RecipeCreate, request: Request) -> dict[str, object]:
    """Create a recipe with computed nutrition."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.create_recipe(
        body.user_id, body.model_dump(exclude={"user_id"})
    )
    return success(recipe_to_dict(recipe))


@router.get("/recipe")
async def list_recipes(  # noqa: PLR0913
    request: Request,
    user_id: UUID | None = None,
    category: str | None = None,
    query: str | None = None,
    public_only: bool = False,
    limit: int = Query(default=50, ge=1, le=100),
) -> dict[str, object]:
    """List recipes visible to a user, or public ones."""
    container: AppContainer = request.app.state.container
    recipes = container.recipe_service.list_recipes(
        user_id=user_id,
        category=category,
        query=query,
        public_only=public_only,
        limit=limit,
    )
    return success([recipe_to_dict(recipe) for recipe in recipes])


@router.get("/recipe/{recipe_id}")
async def get_recipe(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Return a recipe."""
    container: AppContainer = request.app.state.container
    return success(recipe_to_dict(container.recipe_service.get_recipe(recipe_id)))


@router.put("/recipe/{recipe_id}")
async def update_recipe(
    recipe_id: UUID, body: RecipeUpdate, request: Request
) -> dict[str, object]:
    """Update a recipe, recomputing nutrition when needed."""
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.update_recipe(
        recipe_id, body.model_dump(exclude_none=True)
    )
    return success(recipe_to_dict(recipe))


@router.delete("/recipe/{recipe_id}")
async def delete_recipe(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Delete a recipe."""
    container: AppContainer = request.app.state.container
    container.recipe_service.delete_recipe(recipe_id)
    return success({"id": str(recipe_id)})
