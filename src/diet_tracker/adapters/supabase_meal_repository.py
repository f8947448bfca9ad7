"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import date, datetime, time
from uuid import UUID

from supabase import Client

from diet_tracker.domain.meals import Meal
from diet_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def get_by_id(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_by_user_and_date_range(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[Meal]:
        """Return a user's meals in the inclusive date range."""
        request = self.client.table("meals").select("*").eq("user_id", str(user_id))
        if start is not None:
            request = request.gte("meal_date", start.isoformat())
        if end is not None:
            request = request.lte("meal_date", end.isoformat())
        response = (
            request.order("meal_date", desc=False)
            .order("meal_time", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def upsert(self, meal: Meal) -> Meal:
        """Insert or replace a meal row."""
        response = (
            self.client.table("meals")
            .upsert(
                {
                    "id": str(meal.id),
                    "user_id": str(meal.user_id),
                    "name": meal.name,
                    "meal_date": meal.meal_date.isoformat(),
                    "meal_time": meal.meal_time.isoformat(),
                    "description": meal.description,
                    "location": meal.location,
                    "tags": meal.tags,
                    "registered_at": meal.registered_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save meal")
        return _parse_meal(response.data[0])

    def delete(self, meal_id: UUID) -> bool:
        """Delete a meal row."""
        response = self.client.table("meals").delete().eq("id", str(meal_id)).execute()
        return bool(response.data)


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        meal_date=date.fromisoformat(row["meal_date"]),
        meal_time=time.fromisoformat(row["meal_time"]),
        registered_at=datetime.fromisoformat(row["registered_at"]),
        description=row.get("description"),
        location=row.get("location"),
        tags=list(row.get("tags") or []),
    )
