"""Scaling of per-100 nutrient profiles to absolute quantities."""

import math

from diet_tracker.domain.errors import InvalidQuantity
from diet_tracker.domain.foods import Food
from diet_tracker.domain.nutrition import NutrientProfile

PROFILE_BASIS = 100.0
SERVING_UNITS = frozenset({"portion", "serving", "unit"})


def scale_profile(profile: NutrientProfile, quantity: float) -> NutrientProfile:
    """Scale a per-100 profile to the given base-unit quantity."""
    _check_quantity(quantity)
    return profile.multiply(quantity / PROFILE_BASIS)


def food_base_quantity(food: Food, quantity: float, unit: str) -> float:
    """Convert a quantity of food to grams using its conversion factors."""
    _check_quantity(quantity)
    if unit == "g":
        return quantity
    factor = food.conversion_factors.get(unit)
    if factor is not None:
        return quantity * factor
    if unit == "ml":
        return quantity
    if unit == "portion":
        return quantity * food.standard_portion
    raise InvalidQuantity(f"No conversion from '{unit}' to grams for {food.name}")


def recipe_base_quantity(quantity: float, unit: str) -> float:
    """Convert a number of recipe servings to the scaler's base quantity."""
    _check_quantity(quantity)
    if unit not in SERVING_UNITS:
        raise InvalidQuantity(f"Recipes are measured in servings, not '{unit}'")
    return quantity * PROFILE_BASIS


def _check_quantity(quantity: float) -> None:
    if math.isnan(quantity) or math.isinf(quantity) or quantity < 0:
        raise InvalidQuantity(f"Invalid quantity: {quantity}")
