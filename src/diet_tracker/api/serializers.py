"""JSON shapes for API responses."""

from diet_tracker.domain.dashboard import DashboardReport
from diet_tracker.domain.foods import Food
from diet_tracker.domain.goals import Goal
from diet_tracker.domain.meals import Meal, MealItem
from diet_tracker.domain.recipes import Recipe


def success(data: object) -> dict[str, object]:
    """Wrap a payload in the success envelope."""
    return {"success": True, "data": data}


def error(code: str, message: str) -> dict[str, object]:
    """Build the error envelope."""
    return {"success": False, "error": {"code": code, "message": message}}


def food_to_dict(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "category": food.category,
        "subcategory": food.subcategory,
        **food.nutrients.as_dict(),
        "vitamins": food.vitamins,
        "minerals": food.minerals,
        "data_source": food.data_source,
        "standard_portion": food.standard_portion,
        "standard_portion_unit": food.standard_portion_unit,
        "conversion_factors": food.conversion_factors,
        "is_public": food.is_public,
        "tags": food.tags,
    }


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "user_id": str(recipe.user_id),
        "name": recipe.name,
        "description": recipe.description,
        "category": recipe.category,
        "servings": recipe.servings,
        "prep_time_minutes": recipe.prep_time_minutes,
        "ingredients": [
            {
                "food_id": str(ingredient.food_id),
                "quantity": ingredient.quantity,
                "unit": ingredient.unit,
            }
            for ingredient in recipe.ingredients
        ],
        "instructions": recipe.instructions,
        "totals": recipe.totals.as_dict(),
        "per_serving": recipe.per_serving.as_dict(),
        "is_public": recipe.is_public,
        "tags": recipe.tags,
        "created_at": recipe.created_at.isoformat(),
        "updated_at": recipe.updated_at.isoformat(),
    }


def meal_to_dict(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "name": meal.name,
        "meal_date": meal.meal_date.isoformat(),
        "meal_time": meal.meal_time.isoformat(timespec="minutes"),
        "description": meal.description,
        "location": meal.location,
        "tags": meal.tags,
        "registered_at": meal.registered_at.isoformat(),
    }


def meal_item_to_dict(item: MealItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "meal_id": str(item.meal_id),
        "item_type": item.item_type,
        "food_id": str(item.food_id) if item.food_id else None,
        "recipe_id": str(item.recipe_id) if item.recipe_id else None,
        "quantity": item.quantity,
        "unit": item.unit,
        "nutrition": item.nutrition.as_dict(),
        "observation": item.observation,
        "created_at": item.created_at.isoformat() if item.created_at else None,
    }


def goal_to_dict(goal: Goal) -> dict[str, object]:
    return {
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


def dashboard_to_dict(report: DashboardReport) -> dict[str, object]:
    """Flatten a dashboard report into its response shape."""
    summary = report.daily_summary
    progress = report.goal_progress
    remaining = report.remaining_macros
    return {
        "date": report.day.isoformat(),
        "daily_summary": {
            "calories": summary.calories,
            "protein": summary.protein_g,
            "carbs": summary.carbs_g,
            "fat": summary.fat_g,
            "fiber": summary.fiber_g,
        },
        "macro_distribution": {
            "protein": report.macro_distribution.protein,
            "carbs": report.macro_distribution.carbs,
            "fat": report.macro_distribution.fat,
        },
        "meals": [
            {
                "meal_id": str(meal.meal_id),
                "meal_name": meal.meal_name,
                "meal_time": meal.meal_time.isoformat(timespec="minutes"),
                "calories": meal.nutrition.calories,
                "protein": meal.nutrition.protein_g,
                "carbs": meal.nutrition.carbs_g,
                "fat": meal.nutrition.fat_g,
                "fiber": meal.nutrition.fiber_g,
            }
            for meal in report.meals
        ],
        "goal_progress": (
            {
                "calories": progress.calories,
                "protein": progress.protein,
                "carbs": progress.carbs,
                "fat": progress.fat,
                "fiber": progress.fiber,
            }
            if progress
            else None
        ),
        "remaining_calories": report.remaining_calories,
        "remaining_macros": (
            {
                "protein": remaining.protein,
                "carbs": remaining.carbs,
                "fat": remaining.fat,
                "fiber": remaining.fiber,
            }
            if remaining
            else None
        ),
        "last_updated": report.last_updated.isoformat(),
    }
