"""Domain models for dietary goals."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID


class MacroType(StrEnum):
    """How protein, carb and fat targets are expressed."""

    GRAMS = "grams"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class Goal:
    """A user's dietary goal."""

    id: UUID
    user_id: UUID
    name: str
    start_date: date
    calories_target: float
    macro_type: MacroType
    active: bool
    end_date: date | None = None
    protein_target: float | None = None
    carbs_target: float | None = None
    fat_target: float | None = None
    fiber_target: float | None = None
    notes: str | None = None
