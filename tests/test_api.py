"""Tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from diet_tracker.api.app import create_app


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container))


def _create_meal(client, user_id, meal_date="2024-05-10"):
    response = client.post(
        "/api/v1/meal",
        json={
            "user_id": str(user_id),
            "name": "Lunch",
            "meal_date": meal_date,
            "meal_time": "12:30",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_food_search_and_get(client, banana) -> None:
    response = client.get("/api/v1/food", params={"query": "ban"})

    assert response.status_code == 200
    foods = response.json()["data"]
    assert [food["name"] for food in foods] == ["Banana"]

    detail = client.get(f"/api/v1/food/{banana.id}").json()["data"]
    assert detail["calories"] == 89
    assert detail["conversion_factors"]["unit"] == 118


def test_food_search_by_tags(client) -> None:
    response = client.get("/api/v1/food", params={"tags": "Fruta, carne"})

    names = sorted(food["name"] for food in response.json()["data"])
    assert names == ["Banana", "Frango Grelhado"]


def test_meal_item_snapshot_and_dashboard(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)

    response = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "quantity": 150,
            "unit": "g",
        },
    )

    assert response.status_code == 201
    item = response.json()["data"]
    assert item["item_type"] == "food"
    assert item["nutrition"]["calories"] == pytest.approx(133.5)

    dashboard = client.get(
        "/api/v1/dashboard", params={"user_id": str(user_id), "date": "2024-05-10"}
    ).json()["data"]
    assert dashboard["date"] == "2024-05-10"
    assert dashboard["daily_summary"]["calories"] == pytest.approx(133.5)
    assert dashboard["meals"][0]["meal_name"] == "Lunch"
    assert dashboard["goal_progress"] is None
    distribution = dashboard["macro_distribution"]
    assert sum(distribution.values()) == pytest.approx(100)


def test_meal_item_requires_a_reference(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)

    neither = client.post(
        "/api/v1/meal-food",
        json={"meal_id": meal["id"], "quantity": 1, "unit": "g"},
    )
    both = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "recipe_id": str(uuid4()),
            "quantity": 1,
            "unit": "g",
        },
    )

    assert neither.status_code == 400
    assert neither.json()["error"]["code"] == "INVALID_REFERENCE"
    assert both.status_code == 400


def test_meal_item_for_missing_meal(client, banana) -> None:
    response = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": str(uuid4()),
            "food_id": str(banana.id),
            "quantity": 100,
            "unit": "g",
        },
    )

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "MEAL_NOT_FOUND"


def test_meal_item_validation_error(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)

    response = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "quantity": -5,
            "unit": "g",
        },
    )

    assert response.status_code == 422


def test_update_meal_item_rescales(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)
    item = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "quantity": 100,
            "unit": "g",
        },
    ).json()["data"]

    response = client.put(
        f"/api/v1/meal-food/{item['id']}", json={"quantity": 1, "unit": "unit"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["nutrition"]["calories"] == pytest.approx(
        89 * 1.18
    )


def test_recipe_lifecycle(client, user_id, rice) -> None:
    response = client.post(
        "/api/v1/recipe",
        json={
            "user_id": str(user_id),
            "name": "Arroz",
            "category": "lunch",
            "servings": 2,
            "ingredients": [{"food_id": str(rice.id), "quantity": 200, "unit": "g"}],
        },
    )

    assert response.status_code == 201
    recipe = response.json()["data"]
    assert recipe["totals"]["calories"] == pytest.approx(260)
    assert recipe["per_serving"]["calories"] == pytest.approx(130)

    updated = client.put(f"/api/v1/recipe/{recipe['id']}", json={"servings": 4})
    assert updated.json()["data"]["per_serving"]["calories"] == pytest.approx(65)

    listed = client.get("/api/v1/recipe", params={"user_id": str(user_id)})
    assert [entry["id"] for entry in listed.json()["data"]] == [recipe["id"]]

    deleted = client.delete(f"/api/v1/recipe/{recipe['id']}")
    assert deleted.status_code == 200
    assert client.get(f"/api/v1/recipe/{recipe['id']}").status_code == 404


def test_recipe_with_missing_food(client, user_id) -> None:
    response = client.post(
        "/api/v1/recipe",
        json={
            "user_id": str(user_id),
            "name": "Ghost",
            "category": "other",
            "servings": 1,
            "ingredients": [{"food_id": str(uuid4()), "quantity": 10, "unit": "g"}],
        },
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "FOOD_NOT_FOUND"
    assert client.get("/api/v1/recipe", params={"user_id": str(user_id)}).json()[
        "data"
    ] == []


def test_goal_exclusivity_over_http(client, user_id) -> None:
    payload = {
        "user_id": str(user_id),
        "start_date": "2024-05-01",
        "calories_target": 2000,
        "macro_type": "grams",
    }
    goal_a = client.post("/api/v1/goal", json={**payload, "name": "A"}).json()["data"]
    goal_b = client.post(
        "/api/v1/goal", json={**payload, "name": "B", "active": True}
    ).json()["data"]

    active = client.get(
        "/api/v1/goal", params={"user_id": str(user_id), "active_only": True}
    ).json()["data"]
    assert [goal["id"] for goal in active] == [goal_b["id"]]
    assert client.get(f"/api/v1/goal/{goal_a['id']}").json()["data"]["active"] is False

    client.put(f"/api/v1/goal/{goal_a['id']}", json={"active": True})
    assert client.get(f"/api/v1/goal/{goal_b['id']}").json()["data"]["active"] is False


def test_goal_date_range_validation(client, user_id) -> None:
    response = client.post(
        "/api/v1/goal",
        json={
            "user_id": str(user_id),
            "name": "Bad",
            "start_date": "2024-05-10",
            "end_date": "2024-05-01",
            "calories_target": 2000,
            "macro_type": "grams",
        },
    )

    assert response.status_code == 422


def test_dashboard_with_goal(client, user_id, chicken) -> None:
    client.post(
        "/api/v1/goal",
        json={
            "user_id": str(user_id),
            "name": "Bulk",
            "start_date": "2024-05-01",
            "calories_target": 3000,
            "protein_target": 31,
            "macro_type": "grams",
        },
    )
    meal = _create_meal(client, user_id)
    client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(chicken.id),
            "quantity": 100,
            "unit": "g",
        },
    )

    dashboard = client.get(
        "/api/v1/dashboard", params={"user_id": str(user_id), "date": "2024-05-10"}
    ).json()["data"]

    assert dashboard["goal_progress"]["calories"] == pytest.approx(5.5)
    assert dashboard["goal_progress"]["protein"] == pytest.approx(100)
    assert dashboard["goal_progress"]["carbs"] is None
    assert dashboard["remaining_calories"] == pytest.approx(2835)
    assert dashboard["remaining_macros"]["protein"] == pytest.approx(0)


def test_delete_meal_cascades(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)
    client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "quantity": 100,
            "unit": "g",
        },
    )

    response = client.delete(f"/api/v1/meal/{meal['id']}")

    assert response.status_code == 200
    items = client.get("/api/v1/meal-food", params={"meal_id": meal["id"]})
    assert items.json()["data"] == []
    assert client.get(f"/api/v1/meal/{meal['id']}").status_code == 404


def test_update_meal_item_clears_observation(client, user_id, banana) -> None:
    meal = _create_meal(client, user_id)
    item = client.post(
        "/api/v1/meal-food",
        json={
            "meal_id": meal["id"],
            "food_id": str(banana.id),
            "quantity": 100,
            "unit": "g",
            "observation": "ripe",
        },
    ).json()["data"]

    response = client.put(
        f"/api/v1/meal-food/{item['id']}", json={"observation": None}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["observation"] is None
    assert data["quantity"] == 100
    assert data["nutrition"] == item["nutrition"]


def test_update_goal_clears_optional_fields(client, user_id) -> None:
    goal = client.post(
        "/api/v1/goal",
        json={
            "user_id": str(user_id),
            "name": "Cut",
            "start_date": "2024-05-01",
            "end_date": "2024-06-01",
            "calories_target": 1800,
            "protein_target": 120,
            "macro_type": "grams",
            "notes": "summer",
        },
    ).json()["data"]

    response = client.put(
        f"/api/v1/goal/{goal['id']}",
        json={"end_date": None, "notes": None, "protein_target": None},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["end_date"] is None
    assert data["notes"] is None
    assert data["protein_target"] is None
    assert data["name"] == "Cut"
    assert data["active"] is True
