"""Services for the food catalog."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import ReferenceNotFound
from diet_tracker.domain.foods import Food


class FoodRepository(Protocol):
    """Persistence interface for catalog foods."""

    def get_by_id(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def search(
        self,
        query: str | None,
        category: str | None,
        tags: list[str],
        limit: int,
    ) -> list[Food]:
        """Return public foods matching the filters."""


@dataclass
class FoodService:
    """Read-only access to the food catalog."""

    repository: FoodRepository

    def get_food(self, food_id: UUID) -> Food:
        """Return a food or raise ReferenceNotFound."""
        food = self.repository.get_by_id(food_id)
        if food is None:
            raise ReferenceNotFound("food", food_id)
        return food

    def search(
        self,
        query: str | None = None,
        category: str | None = None,
        tags: str | None = None,
        limit: int = 50,
    ) -> list[Food]:
        """Search public foods by name, category and comma-separated tags."""
        return self.repository.search(
            query=query.strip() if query else None,
            category=category,
            tags=_parse_tags(tags),
            limit=limit,
        )


def _parse_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [tag.strip().lower() for tag in raw.split(",") if tag.strip()]
