"""Domain models for the daily dashboard."""

from dataclasses import dataclass
from datetime import date, datetime, time
from uuid import UUID

from diet_tracker.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class MealSummary:
    """Nutrition subtotal for one meal of the day."""

    meal_id: UUID
    meal_name: str
    meal_time: time
    nutrition: NutrientProfile


@dataclass(frozen=True)
class MacroDistribution:
    """Share of macro energy, in percent."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class GoalProgress:
    """Percent of each target reached; None for untargeted nutrients."""

    calories: float
    protein: float | None
    carbs: float | None
    fat: float | None
    fiber: float | None


@dataclass(frozen=True)
class RemainingMacros:
    """Grams left before each macro target is reached."""

    protein: float | None
    carbs: float | None
    fat: float | None
    fiber: float | None


@dataclass(frozen=True)
class DashboardReport:
    """Daily nutrition report for a user."""

    day: date
    daily_summary: NutrientProfile
    macro_distribution: MacroDistribution
    meals: list[MealSummary]
    goal_progress: GoalProgress | None
    remaining_calories: float | None
    remaining_macros: RemainingMacros | None
    last_updated: datetime
