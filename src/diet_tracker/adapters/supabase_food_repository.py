"""Supabase repository for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.foods import Food
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed food catalog."""

    client: Client

    def get_by_id(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search(
        self,
        query: str | None,
        category: str | None,
        tags: list[str],
        limit: int,
    ) -> list[Food]:
        """Return public foods matching the filters."""
        request = self.client.table("foods").select("*").eq("is_public", True)
        if query:
            request = request.ilike("name", f"%{query}%")
        if category:
            request = request.eq("category", category)
        if tags:
            request = request.ov("tags", tags)
        response = request.order("name", desc=False).limit(limit).execute()
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> Food:
    creator = row.get("creator_user_id")
    return Food(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        subcategory=row.get("subcategory"),
        nutrients=NutrientProfile(
            calories=float(row.get("calories", 0.0)),
            protein_g=float(row.get("protein_g", 0.0)),
            carbs_g=float(row.get("carbs_g", 0.0)),
            fat_g=float(row.get("fat_g", 0.0)),
            fiber_g=float(row.get("fiber_g", 0.0)),
        ),
        vitamins=dict(row.get("vitamins") or {}),
        minerals=dict(row.get("minerals") or {}),
        data_source=str(row.get("data_source") or "manual"),
        standard_portion=float(row.get("standard_portion") or 100.0),
        standard_portion_unit=str(row.get("standard_portion_unit") or "g"),
        conversion_factors={
            unit: float(factor)
            for unit, factor in (row.get("conversion_factors") or {}).items()
        },
        is_public=bool(row.get("is_public", True)),
        tags=list(row.get("tags") or []),
        creator_user_id=UUID(creator) if creator else None,
    )
