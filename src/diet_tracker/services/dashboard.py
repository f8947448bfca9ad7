"""Daily dashboard aggregation."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from diet_tracker.domain.dashboard import (
    DashboardReport,
    GoalProgress,
    MacroDistribution,
    MealSummary,
    RemainingMacros,
)
from diet_tracker.domain.goals import Goal, MacroType
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.services.goals import GoalService
from diet_tracker.services.meals import MealItemRepository, MealRepository

KCAL_PER_GRAM_PROTEIN = 4.0
KCAL_PER_GRAM_CARBS = 4.0
KCAL_PER_GRAM_FAT = 9.0


@dataclass
class DashboardService:
    """Builds the daily report; recomputed from storage on every call."""

    meals: MealRepository
    items: MealItemRepository
    goals: GoalService
    timezone_name: str = "UTC"

    def get_dashboard(self, user_id: UUID, day: date | None = None) -> DashboardReport:
        """Return totals, macro split and goal progress for a user's day."""
        target_day = day or datetime.now(tz=ZoneInfo(self.timezone_name)).date()
        meals = self.meals.list_by_user_and_date_range(user_id, target_day, target_day)

        total = NutrientProfile.zero()
        summaries: list[MealSummary] = []
        for meal in meals:
            subtotal = NutrientProfile.zero()
            for item in self.items.list_by_meal(meal.id):
                subtotal = subtotal + item.nutrition
            total = total + subtotal
            summaries.append(
                MealSummary(
                    meal_id=meal.id,
                    meal_name=meal.name,
                    meal_time=meal.meal_time,
                    nutrition=subtotal,
                )
            )

        goal = self.goals.get_active_goal(user_id)
        progress = remaining_calories = remaining_macros = None
        if goal is not None:
            progress, remaining_calories, remaining_macros = _goal_progress(
                goal, total
            )

        return DashboardReport(
            day=target_day,
            daily_summary=total,
            macro_distribution=macro_distribution(total),
            meals=summaries,
            goal_progress=progress,
            remaining_calories=remaining_calories,
            remaining_macros=remaining_macros,
            last_updated=datetime.now(tz=UTC),
        )


def macro_distribution(total: NutrientProfile) -> MacroDistribution:
    """Return each macro's share of macro energy; all zero without energy."""
    protein_kcal = total.protein_g * KCAL_PER_GRAM_PROTEIN
    carbs_kcal = total.carbs_g * KCAL_PER_GRAM_CARBS
    fat_kcal = total.fat_g * KCAL_PER_GRAM_FAT
    macro_kcal = protein_kcal + carbs_kcal + fat_kcal
    if macro_kcal <= 0:
        return MacroDistribution(protein=0.0, carbs=0.0, fat=0.0)
    return MacroDistribution(
        protein=protein_kcal / macro_kcal * 100,
        carbs=carbs_kcal / macro_kcal * 100,
        fat=fat_kcal / macro_kcal * 100,
    )


def gram_targets(goal: Goal) -> dict[str, float | None]:
    """Return macro targets in grams, converting percentage-mode targets."""
    targets = {
        "protein": goal.protein_target,
        "carbs": goal.carbs_target,
        "fat": goal.fat_target,
    }
    if goal.macro_type == MacroType.PERCENTAGE:
        kcal_per_gram = {
            "protein": KCAL_PER_GRAM_PROTEIN,
            "carbs": KCAL_PER_GRAM_CARBS,
            "fat": KCAL_PER_GRAM_FAT,
        }
        targets = {
            name: goal.calories_target * pct / 100 / kcal_per_gram[name]
            if pct
            else pct
            for name, pct in targets.items()
        }
    targets["fiber"] = goal.fiber_target
    return targets


def _goal_progress(
    goal: Goal, total: NutrientProfile
) -> tuple[GoalProgress, float, RemainingMacros]:
    targets = gram_targets(goal)
    consumed = {
        "protein": total.protein_g,
        "carbs": total.carbs_g,
        "fat": total.fat_g,
        "fiber": total.fiber_g,
    }
    percent: dict[str, float | None] = {}
    remaining: dict[str, float | None] = {}
    for name, target in targets.items():
        if target:
            percent[name] = consumed[name] / target * 100
            remaining[name] = target - consumed[name]
        else:
            percent[name] = None
            remaining[name] = None

    calories_target = goal.calories_target
    calories_percent = (
        total.calories / calories_target * 100 if calories_target > 0 else 0.0
    )
    progress = GoalProgress(calories=calories_percent, **percent)
    return progress, calories_target - total.calories, RemainingMacros(**remaining)
