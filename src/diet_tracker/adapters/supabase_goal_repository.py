"""Supabase repository for dietary goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_tracker.domain.goals import Goal, MacroType
from diet_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def get_by_id(self, goal_id: UUID) -> Goal | None:
        """Return a goal by id, if present."""
        response = (
            self.client.table("goals")
            .select("*")
            .eq("id", str(goal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def list_by_user(self, user_id: UUID, active_only: bool = False) -> list[Goal]:
        """Return a user's goals."""
        request = self.client.table("goals").select("*").eq("user_id", str(user_id))
        if active_only:
            request = request.eq("active", True)
        response = request.order("start_date", desc=True).execute()
        return [_parse_goal(row) for row in response.data or []]

    def upsert(self, goal: Goal) -> Goal:
        """Insert or replace a goal row."""
        response = (
            self.client.table("goals")
            .upsert(
                {
                    "id": str(goal.id),
                    "user_id": str(goal.user_id),
                    "name": goal.name,
                    "start_date": goal.start_date.isoformat(),
                    "end_date": goal.end_date.isoformat() if goal.end_date else None,
                    "calories_target": goal.calories_target,
                    "protein_target": goal.protein_target,
                    "carbs_target": goal.carbs_target,
                    "fat_target": goal.fat_target,
                    "fiber_target": goal.fiber_target,
                    "macro_type": goal.macro_type.value,
                    "active": goal.active,
                    "notes": goal.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save goal")
        return _parse_goal(response.data[0])


def _optional_float(value: object) -> float | None:
    return float(value) if isinstance(value, int | float) else None


def _parse_goal(row: dict[str, object]) -> Goal:
    end_raw = row.get("end_date")
    return Goal(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        start_date=date.fromisoformat(row["start_date"]),
        end_date=date.fromisoformat(end_raw) if end_raw else None,
        calories_target=float(row.get("calories_target", 0.0)),
        protein_target=_optional_float(row.get("protein_target")),
        carbs_target=_optional_float(row.get("carbs_target")),
        fat_target=_optional_float(row.get("fat_target")),
        fiber_target=_optional_float(row.get("fiber_target")),
        macro_type=MacroType(row.get("macro_type") or MacroType.GRAMS),
        active=bool(row.get("active", False)),
        notes=row.get("notes"),
    )
