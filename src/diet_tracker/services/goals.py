"""Dietary goal service enforcing a single active goal per user."""

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import (
    InvalidGoal,
    InvariantViolation,
    ReferenceNotFound,
)
from diet_tracker.domain.goals import Goal, MacroType

_logger = logging.getLogger(__name__)

LOCK_STRIPES = 64

_UPDATABLE_FIELDS = (
    "name",
    "start_date",
    "end_date",
    "calories_target",
    "protein_target",
    "carbs_target",
    "fat_target",
    "fiber_target",
    "macro_type",
    "active",
    "notes",
)

_NULLABLE_FIELDS = frozenset(
    {
        "end_date",
        "protein_target",
        "carbs_target",
        "fat_target",
        "fiber_target",
        "notes",
    }
)


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def get_by_id(self, goal_id: UUID) -> Goal | None:
        """Return a goal by id, if present."""

    def list_by_user(self, user_id: UUID, active_only: bool = False) -> list[Goal]:
        """Return a user's goals, optionally only active ones."""

    def upsert(self, goal: Goal) -> Goal:
        """Insert or replace a goal and return it."""


@dataclass
class GoalService:
    """Application service for dietary goals.

    Activation is a two-phase write: every other active goal of the user is
    deactivated, then the activated goal is written. Both phases run under a
    per-user lock so concurrent activations cannot both succeed. Updates read
    the goal again under that lock before writing it back.
    """

    repository: GoalRepository
    _locks: tuple[threading.Lock, ...] = field(
        default_factory=lambda: tuple(threading.Lock() for _ in range(LOCK_STRIPES)),
        repr=False,
    )

    def create_goal(self, user_id: UUID, payload: dict[str, object]) -> Goal:
        """Create a goal; it is active unless active=False is given."""
        active = payload.get("active") is not False
        goal = Goal(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            start_date=payload["start_date"],
            end_date=payload.get("end_date"),
            calories_target=float(payload["calories_target"]),
            protein_target=payload.get("protein_target"),
            carbs_target=payload.get("carbs_target"),
            fat_target=payload.get("fat_target"),
            fiber_target=payload.get("fiber_target"),
            macro_type=MacroType(payload.get("macro_type") or MacroType.GRAMS),
            active=active,
            notes=payload.get("notes"),
        )
        _check_date_range(goal)
        with self.user_lock(user_id):
            if not active:
                return self.repository.upsert(goal)
            self._deactivate_others(user_id, keep_id=None)
            return self._write_enforced(goal)

    def update_goal(self, goal_id: UUID, payload: dict[str, object]) -> Goal:
        """Apply an update; activating the goal deactivates the user's others.

        A null clears end_date, notes and the macro targets. Null for any other
        field leaves it unchanged.
        """
        changes = {
            key: payload[key]
            for key in _UPDATABLE_FIELDS
            if key in payload
            and (payload[key] is not None or key in _NULLABLE_FIELDS)
        }
        if "macro_type" in changes:
            changes["macro_type"] = MacroType(changes["macro_type"])
        owner = self.get_goal(goal_id).user_id
        with self.user_lock(owner):
            updated = replace(self.get_goal(goal_id), **changes)
            _check_date_range(updated)
            if changes.get("active") is not True:
                return self.repository.upsert(updated)
            self._deactivate_others(owner, keep_id=goal_id)
            return self._write_enforced(updated)

    def get_goal(self, goal_id: UUID) -> Goal:
        """Return a goal or raise ReferenceNotFound."""
        goal = self.repository.get_by_id(goal_id)
        if goal is None:
            raise ReferenceNotFound("goal", goal_id)
        return goal

    def list_goals(self, user_id: UUID, active_only: bool = False) -> list[Goal]:
        """Return a user's goals."""
        return self.repository.list_by_user(user_id, active_only=active_only)

    def get_active_goal(self, user_id: UUID) -> Goal | None:
        """Return the user's active goal, if any."""
        active = self.repository.list_by_user(user_id, active_only=True)
        return active[0] if active else None

    def user_lock(self, user_id: UUID) -> threading.Lock:
        """Return the lock guarding a user's goals; users share a fixed pool."""
        return self._locks[hash(user_id) % len(self._locks)]

    def _deactivate_others(self, user_id: UUID, keep_id: UUID | None) -> None:
        for goal in self.repository.list_by_user(user_id, active_only=True):
            if goal.id == keep_id:
                continue
            self._write_enforced(replace(goal, active=False))
            _logger.info("Deactivated goal: goal_id=%s user_id=%s", goal.id, user_id)

    def _write_enforced(self, goal: Goal) -> Goal:
        try:
            return self.repository.upsert(goal)
        except Exception as exc:
            raise InvariantViolation(
                f"Failed to write goal {goal.id} while enforcing the active goal"
            ) from exc


def _check_date_range(goal: Goal) -> None:
    if goal.end_date is not None and goal.end_date < goal.start_date:
        raise InvalidGoal("End date must be on or after start date")
