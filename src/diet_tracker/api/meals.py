"""Meal and meal item endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, status

from diet_tracker.api.schemas import (  # noqa: TC001
    MealCreate,
    MealItemCreate,
    MealItemUpdate,
    MealUpdate,
)
from diet_tracker.api.serializers import meal_item_to_dict, meal_to_dict, success
from diet_tracker.services.meal_items import item_source

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(tags=["meals"])


@router.post("/meal", status_code=status.HTTP_201_CREATED)
async def create_meal(body: MealCreate, request: Request) -> dict[str, object]:
    """Create a meal container."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.create_meal(
        body.user_id, body.model_dump(exclude={"user_id"})
    )
    return success(meal_to_dict(meal))


@router.get("/meal")
async def list_meals(  # noqa: PLR0913
    request: Request,
    user_id: UUID,
    start_date: date | None = None,
    end_date: date | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=100),
) -> dict[str, object]:
    """List a user's meals in a date range."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals(
        user_id, start=start_date, end=end_date, page=page, limit=limit
    )
    return success([meal_to_dict(meal) for meal in meals])


@router.get("/meal/{meal_id}")
async def get_meal(meal_id: UUID, request: Request) -> dict[str, object]:
    """Return a meal."""
    container: AppContainer = request.app.state.container
    return success(meal_to_dict(container.meal_service.get_meal(meal_id)))


@router.put("/meal/{meal_id}")
async def update_meal(
    meal_id: UUID, body: MealUpdate, request: Request
) -> dict[str, object]:
    """Update meal metadata."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.update_meal(
        meal_id, body.model_dump(exclude_none=True)
    )
    return success(meal_to_dict(meal))


@router.delete("/meal/{meal_id}")
async def delete_meal(meal_id: UUID, request: Request) -> dict[str, object]:
    """Delete a meal and its items."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(meal_id)
    return success({"id": str(meal_id)})


@router.post("/meal-food", status_code=status.HTTP_201_CREATED)
async def create_meal_item(body: MealItemCreate, request: Request) -> dict[str, object]:
    """Add a food or recipe to a meal."""
    container: AppContainer = request.app.state.container
    item = container.meal_item_service.create_item(
        meal_id=body.meal_id,
        source=item_source(body.food_id, body.recipe_id),
        quantity=body.quantity,
        unit=body.unit,
        observation=body.observation,
    )
    return success(meal_item_to_dict(item))


@router.get("/meal-food")
async def list_meal_items(meal_id: UUID, request: Request) -> dict[str, object]:
    """List the items of a meal."""
    container: AppContainer = request.app.state.container
    items = container.meal_item_service.list_items(meal_id)
    return success([meal_item_to_dict(item) for item in items])


@router.put("/meal-food/{item_id}")
async def update_meal_item(
    item_id: UUID, body: MealItemUpdate, request: Request
) -> dict[str, object]:
    """Change an item's quantity, unit or observation."""
    container: AppContainer = request.app.state.container
    item = container.meal_item_service.update_item(
        item_id, body.model_dump(exclude_unset=True)
    )
    return success(meal_item_to_dict(item))


@router.delete("/meal-food/{item_id}")
async def delete_meal_item(item_id: UUID, request: Request) -> dict[str, object]:
    """Remove an item from its meal."""
    container: AppContainer = request.app.state.container
    container.meal_item_service.delete_item(item_id)
    return success({"id": str(item_id)})
