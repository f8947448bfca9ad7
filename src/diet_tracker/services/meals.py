"""Meal logging service."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import ReferenceNotFound
from diet_tracker.domain.meals import Meal, MealItem

_UPDATABLE_FIELDS = (
    "name",
    "meal_date",
    "meal_time",
    "description",
    "location",
    "tags",
)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def get_by_id(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def list_by_user_and_date_range(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[Meal]:
        """Return a user's meals with start <= meal_date <= end."""

    def upsert(self, meal: Meal) -> Meal:
        """Insert or replace a meal and return it."""

    def delete(self, meal_id: UUID) -> bool:
        """Delete a meal; return False if it did not exist."""


class MealItemRepository(Protocol):
    """Persistence interface for meal items."""

    def get_by_id(self, item_id: UUID) -> MealItem | None:
        """Return a meal item by id, if present."""

    def list_by_meal(self, meal_id: UUID) -> list[MealItem]:
        """Return the items of a meal."""

    def upsert(self, item: MealItem) -> MealItem:
        """Insert or replace a meal item and return it."""

    def delete(self, item_id: UUID) -> bool:
        """Delete a meal item; return False if it did not exist."""


@dataclass
class MealService:
    """Application service for meal containers."""

    repository: MealRepository
    item_repository: MealItemRepository

    def create_meal(self, user_id: UUID, payload: dict[str, object]) -> Meal:
        """Create and persist a meal."""
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            meal_date=payload["meal_date"],
            meal_time=payload["meal_time"],
            registered_at=datetime.now(tz=UTC),
            description=payload.get("description"),
            location=payload.get("location"),
            tags=list(payload.get("tags") or []),
        )
        return self.repository.upsert(meal)

    def get_meal(self, meal_id: UUID) -> Meal:
        """Return a meal or raise ReferenceNotFound."""
        meal = self.repository.get_by_id(meal_id)
        if meal is None:
            raise ReferenceNotFound("meal", meal_id)
        return meal

    def list_meals(  # noqa: PLR0913
        self,
        user_id: UUID,
        start: date | None = None,
        end: date | None = None,
        page: int = 1,
        limit: int = 50,
    ) -> list[Meal]:
        """Return one page of a user's meals in a date range."""
        meals = self.repository.list_by_user_and_date_range(user_id, start, end)
        offset = (max(page, 1) - 1) * limit
        return meals[offset : offset + limit]

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        """Update meal metadata."""
        current = self.get_meal(meal_id)
        changes = {key: payload[key] for key in _UPDATABLE_FIELDS if key in payload}
        if "tags" in changes:
            changes["tags"] = list(changes["tags"] or [])
        return self.repository.upsert(replace(current, **changes))

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal together with its items."""
        self.get_meal(meal_id)
        for item in self.item_repository.list_by_meal(meal_id):
            self.item_repository.delete(item.id)
        self.repository.delete(meal_id)
