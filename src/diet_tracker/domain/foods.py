"""Domain models for the food catalog."""

from dataclasses import dataclass, field
from uuid import UUID

from diet_tracker.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class Food:
    """Reference food with nutrients per 100 grams."""

    id: UUID
    name: str
    category: str
    nutrients: NutrientProfile
    subcategory: str | None = None
    vitamins: dict[str, float] = field(default_factory=dict)
    minerals: dict[str, float] = field(default_factory=dict)
    data_source: str = "manual"
    standard_portion: float = 100.0
    standard_portion_unit: str = "g"
    conversion_factors: dict[str, float] = field(default_factory=dict)
    is_public: bool = True
    tags: list[str] = field(default_factory=list)
    creator_user_id: UUID | None = None
