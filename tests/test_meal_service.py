"""Tests for the meal service."""

from datetime import date, time
from uuid import uuid4

import pytest

from diet_tracker.domain.errors import ReferenceNotFound
from diet_tracker.domain.meals import FoodSource


def _meal(container, user_id, day, hour=8, name="Breakfast"):
    return container.meal_service.create_meal(
        user_id, {"name": name, "meal_date": day, "meal_time": time(hour, 0)}
    )


def test_list_meals_filters_by_user_and_range(container, user_id) -> None:
    first = _meal(container, user_id, date(2024, 5, 1))
    second = _meal(container, user_id, date(2024, 5, 3))
    _meal(container, user_id, date(2024, 5, 9))
    _meal(container, uuid4(), date(2024, 5, 2))

    meals = container.meal_service.list_meals(
        user_id, start=date(2024, 5, 1), end=date(2024, 5, 5)
    )

    assert [meal.id for meal in meals] == [first.id, second.id]


def test_list_meals_paginates(container, user_id) -> None:
    created = [
        _meal(container, user_id, date(2024, 5, 1), hour=hour) for hour in range(5)
    ]

    page = container.meal_service.list_meals(user_id, page=2, limit=2)

    assert [meal.id for meal in page] == [created[2].id, created[3].id]


def test_update_meal_metadata(container, user_id) -> None:
    meal = _meal(container, user_id, date(2024, 5, 1))

    updated = container.meal_service.update_meal(
        meal.id, {"name": "Brunch", "tags": ["weekend"]}
    )

    assert updated.name == "Brunch"
    assert updated.tags == ["weekend"]
    assert updated.meal_date == meal.meal_date


def test_get_missing_meal(container) -> None:
    with pytest.raises(ReferenceNotFound) as exc_info:
        container.meal_service.get_meal(uuid4())

    assert exc_info.value.code == "MEAL_NOT_FOUND"


def test_delete_meal_removes_items(container, repositories, meal, banana) -> None:
    container.meal_item_service.create_item(meal.id, FoodSource(banana.id), 100, "g")
    container.meal_item_service.create_item(meal.id, FoodSource(banana.id), 50, "g")

    container.meal_service.delete_meal(meal.id)

    assert repositories.meals.get_by_id(meal.id) is None
    assert repositories.meal_items.list_by_meal(meal.id) == []
    with pytest.raises(ReferenceNotFound):
        container.meal_service.delete_meal(meal.id)
