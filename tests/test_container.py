"""Tests for container wiring."""

from food_catalog.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.food_service.repository is container.food_repository
    assert container.food_service.count_foods() == 0
