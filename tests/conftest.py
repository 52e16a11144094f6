"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from food_catalog.adapters.in_memory_food_repository import InMemoryFoodRepository
from food_catalog.config import Settings
from food_catalog.containers import AppContainer
from food_catalog.services.foods import FoodService


def banana_payload(**overrides: object) -> dict[str, object]:
    """Return a valid create payload, optionally overriding fields."""
    payload: dict[str, object] = {
        "name": "Banana",
        "description": None,
        "servingSize": 100,
        "unit": "g",
        "calories": 89,
        "carbohydrates": 23,
        "protein": 1.1,
        "totalFat": 0.3,
        "saturatedFat": None,
        "transFat": None,
        "fiber": None,
        "sodium": None,
        "sugars": None,
        "category": "fruits",
        "source": None,
        "barcode": None,
        "brand": None,
    }
    payload.update(overrides)
    return payload


def oats_payload(**overrides: object) -> dict[str, object]:
    """Return a second, fully populated valid payload."""
    payload: dict[str, object] = {
        "name": "Rolled Oats",
        "description": "Whole grain rolled oats",
        "servingSize": 40,
        "unit": "g",
        "calories": 150,
        "carbohydrates": 27,
        "protein": 5,
        "totalFat": 3,
        "saturatedFat": 0.5,
        "transFat": 0,
        "fiber": 4,
        "sodium": 0,
        "sugars": 1,
        "vitamins": [{"name": "Vitamin B1", "quantity": 0.2, "unit": "mg"}],
        "minerals": [
            {"name": "Iron", "quantity": 1.8, "unit": "mg"},
            {"name": "Magnesium", "quantity": 56, "unit": "mg"},
        ],
        "category": "grains",
        "source": "USDA FoodData Central",
        "barcode": "0030000010402",
        "brand": "Quaker",
    }
    payload.update(overrides)
    return payload


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def settings() -> Settings:
    return Settings(app_name="Food Catalog Test", api_prefix="/api/internal")


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def food_service(
    food_repository: InMemoryFoodRepository, clock: FixedClock
) -> FoodService:
    return FoodService(food_repository, clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    food_service: FoodService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        food_repository=food_repository,
        food_service=food_service,
    )
