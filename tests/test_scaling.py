"""Tests for nutrient scaling and unit resolution."""

import math

import pytest

from diet_tracker.domain.errors import InvalidQuantity
from diet_tracker.domain.nutrition import NutrientProfile
from diet_tracker.services.scaling import (
    food_base_quantity,
    recipe_base_quantity,
    scale_profile,
)


def test_scale_profile_banana_150g(banana) -> None:
    scaled = scale_profile(banana.nutrients, 150)

    assert scaled.calories == pytest.approx(133.5)
    assert scaled.protein_g == pytest.approx(1.65)
    assert scaled.carbs_g == pytest.approx(34.2)
    assert scaled.fat_g == pytest.approx(0.45)
    assert scaled.fiber_g == pytest.approx(3.9)


@pytest.mark.parametrize("quantity", [0.5, 1, 42, 100, 250.75])
def test_scale_profile_is_linear(quantity: float) -> None:
    profile = NutrientProfile(
        calories=250, protein_g=12, carbs_g=30, fat_g=8, fiber_g=4
    )

    scaled = scale_profile(profile, quantity)

    assert scaled.calories == pytest.approx(250 * quantity / 100)
    assert scaled.protein_g == pytest.approx(12 * quantity / 100)
    assert scaled.carbs_g == pytest.approx(30 * quantity / 100)
    assert scaled.fat_g == pytest.approx(8 * quantity / 100)
    assert scaled.fiber_g == pytest.approx(4 * quantity / 100)


def test_scale_profile_zero_quantity_gives_zero() -> None:
    profile = NutrientProfile(100, 10, 10, 10, 10)

    assert scale_profile(profile, 0) == NutrientProfile.zero()


@pytest.mark.parametrize("quantity", [-1, math.nan, math.inf])
def test_scale_profile_rejects_invalid_quantity(quantity: float) -> None:
    with pytest.raises(InvalidQuantity):
        scale_profile(NutrientProfile.zero(), quantity)


def test_food_base_quantity_uses_conversion_factor(rice) -> None:
    assert food_base_quantity(rice, 2, "cup") == 316


def test_food_base_quantity_grams_pass_through(rice) -> None:
    assert food_base_quantity(rice, 80, "g") == 80


def test_food_base_quantity_ml_without_factor(banana) -> None:
    assert food_base_quantity(banana, 200, "ml") == 200


def test_food_base_quantity_portion_uses_standard_portion(banana) -> None:
    assert food_base_quantity(banana, 1.5, "portion") == 150


def test_food_base_quantity_rejects_unknown_unit(banana) -> None:
    with pytest.raises(InvalidQuantity):
        food_base_quantity(banana, 1, "tablespoon")


def test_recipe_base_quantity_counts_servings() -> None:
    assert recipe_base_quantity(2, "portion") == 200
    assert recipe_base_quantity(0.5, "serving") == 50


def test_recipe_base_quantity_rejects_weight_units() -> None:
    with pytest.raises(InvalidQuantity):
        recipe_base_quantity(100, "g")
