"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, time
from uuid import UUID, uuid4

import pytest

from diet_tracker.adapters.memory_repositories import (
    SEED_FOODS,
    InMemoryFoodRepository,
    InMemoryGoalRepository,
    InMemoryMealItemRepository,
    InMemoryMealRepository,
    InMemoryRecipeRepository,
)
from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer, Repositories, build_container
from diet_tracker.domain.foods import Food
from diet_tracker.domain.goals import Goal
from diet_tracker.domain.meals import Meal

RICE, CHICKEN, BANANA = SEED_FOODS


@dataclass
class FailingGoalRepository(InMemoryGoalRepository):
    """Goal repository whose writes fail after a number of successes."""

    writes_before_failure: int = 0
    writes: list[UUID] = field(default_factory=list)

    def upsert(self, goal: Goal) -> Goal:
        if len(self.writes) >= self.writes_before_failure:
            raise RuntimeError("Failed to save goal")
        self.writes.append(goal.id)
        return super().upsert(goal)


@dataclass
class InterleavingGoalRepository(InMemoryGoalRepository):
    """Goal repository that runs a callback right after its first read."""

    on_first_read: Callable[[], object] | None = None

    def get_by_id(self, goal_id: UUID) -> Goal | None:
        goal = super().get_by_id(goal_id)
        callback, self.on_first_read = self.on_first_read, None
        if callback is not None:
            callback()
        return goal


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", timezone="UTC")


@pytest.fixture
def repositories() -> Repositories:
    return Repositories(
        foods=InMemoryFoodRepository.seeded(),
        recipes=InMemoryRecipeRepository(),
        meals=InMemoryMealRepository(),
        meal_items=InMemoryMealItemRepository(),
        goals=InMemoryGoalRepository(),
    )


@pytest.fixture
def container(settings: Settings, repositories: Repositories) -> AppContainer:
    return build_container(settings, repositories)


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def banana() -> Food:
    return BANANA


@pytest.fixture
def rice() -> Food:
    return RICE


@pytest.fixture
def chicken() -> Food:
    return CHICKEN


@pytest.fixture
def meal(container: AppContainer, user_id: UUID) -> Meal:
    return container.meal_service.create_meal(
        user_id,
        {
            "name": "Lunch",
            "meal_date": date(2024, 5, 10),
            "meal_time": time(12, 30),
        },
    )
