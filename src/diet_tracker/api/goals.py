"""Dietary goal and dashboard endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, status

from diet_tracker.api.schemas import GoalCreate, GoalUpdate  # noqa: TC001
from diet_tracker.api.serializers import dashboard_to_dict, goal_to_dict, success

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(tags=["goals"])


@router.post("/goal", status_code=status.HTTP_201_CREATED)
async def create_goal(body: GoalCreate, request: Request) -> dict[str, object]:
    """Create a goal; it becomes the user's only active goal unless inactive."""
    container: AppContainer = request.app.state.container
    goal = container.goal_service.create_goal(
        body.user_id, body.model_dump(exclude={"user_id"}, exclude_none=True)
    )
    return success(goal_to_dict(goal))


@router.get("/goal")
async def list_goals(
    user_id: UUID, request: Request, active_only: bool = False
) -> dict[str, object]:
    """List a user's goals."""
    container: AppContainer = request.app.state.container
    goals = container.goal_service.list_goals(user_id, active_only=active_only)
    return success([goal_to_dict(goal) for goal in goals])


@router.get("/goal/{goal_id}")
async def get_goal(goal_id: UUID, request: Request) -> dict[str, object]:
    """Return a goal."""
    container: AppContainer = request.app.state.container
    return success(goal_to_dict(container.goal_service.get_goal(goal_id)))


@router.put("/goal/{goal_id}")
async def update_goal(
    goal_id: UUID, body: GoalUpdate, request: Request
) -> dict[str, object]:
    """Update a goal; activating it deactivates the user's other goals."""
    container: AppContainer = request.app.state.container
    goal = container.goal_service.update_goal(
        goal_id, body.model_dump(exclude_unset=True)
    )
    return success(goal_to_dict(goal))


@router.get("/dashboard")
async def get_dashboard(
    user_id: UUID,
    request: Request,
    day: date | None = Query(default=None, alias="date"),
) -> dict[str, object]:
    """Return the daily nutrition report."""
    container: AppContainer = request.app.state.container
    report = container.dashboard_service.get_dashboard(user_id, day=day)
    return success(dashboard_to_dict(report))
