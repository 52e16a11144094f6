"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_catalog.adapters.in_memory_food_repository import InMemoryFoodRepository
from food_catalog.config import Settings
from food_catalog.services.foods import FoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_repository: InMemoryFoodRepository
    food_service: FoodService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_repository = InMemoryFoodRepository()
    food_service = FoodService(food_repository)
    return AppContainer(
        settings=resolved_settings,
        food_repository=food_repository,
        food_service=food_service,
    )
