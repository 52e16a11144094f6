"""Food catalog business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from food_catalog.domain.errors import NotFoundError
from food_catalog.domain.foods import (
    DeletionResult,
    FoodRecord,
    FoodSummary,
    Micronutrient,
)
from food_catalog.services.validation import (
    FoodPayload,
    MicronutrientPayload,
    validate_create,
    validate_identifier,
    validate_update,
)

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Storage interface for food records."""

    def next_id(self) -> int:
        """Reserve and return the next food id."""

    def insert(self, record: FoodRecord) -> FoodRecord:
        """Store a record under its id."""

    def get_all(self) -> list[FoodRecord]:
        """Return every stored record in a stable order."""

    def get_by_id(self, food_id: int) -> FoodRecord | None:
        """Return a record by id, if present."""

    def replace(self, food_id: int, record: FoodRecord) -> FoodRecord | None:
        """Overwrite an existing record, returning None when it is absent."""

    def delete(self, food_id: int) -> bool:
        """Remove a record and report whether it existed."""

    def exists(self, food_id: int) -> bool:
        """Return whether a record with the id is stored."""

    def count(self) -> int:
        """Return the number of stored records."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class FoodService:
    """Application service for food registration and maintenance."""

    repository: FoodRepository
    clock: Callable[[], datetime] = _utc_now

    def list_foods(self) -> list[FoodSummary]:
        """Return the summary view of every registered food."""
        return [
            FoodSummary(
                id=record.id,
                name=record.name,
                calories=record.calories,
                category=record.category,
                registered_at=record.registered_at,
            )
            for record in self.repository.get_all()
        ]

    def create_food(self, body: object) -> FoodRecord:
        """Validate a payload and register it as a new food."""
        payload = validate_create(body)
        record = _build_record(
            self.repository.next_id(),
            payload,
            registered_at=self.clock(),
            vitamins=_micronutrients(payload.vitamins),
            minerals=_micronutrients(payload.minerals),
        )
        self.repository.insert(record)
        _logger.info("Food created: id=%s name=%s", record.id, record.name)
        return record

    def get_food(self, raw_id: object) -> FoodRecord:
        """Return a food by id."""
        food_id = validate_identifier(raw_id)
        record = self.repository.get_by_id(food_id)
        if record is None:
            raise NotFoundError("Food not found")
        return record

    def update_food(self, raw_id: object, body: object) -> FoodRecord:
        """Replace every mutable field of an existing food.

        The id and registration timestamp never change. Micronutrient lists the
        caller leaves out keep their stored values; an explicit empty list
        clears them.
        """
        food_id = validate_identifier(raw_id)
        payload = validate_update(body)
        existing = self.repository.get_by_id(food_id)
        if existing is None:
            raise NotFoundError("Food not found")

        supplied = payload.model_fields_set
        updated = _build_record(
            existing.id,
            payload,
            registered_at=existing.registered_at,
            vitamins=(
                _micronutrients(payload.vitamins)
                if "vitamins" in supplied
                else existing.vitamins
            ),
            minerals=(
                _micronutrients(payload.minerals)
                if "minerals" in supplied
                else existing.minerals
            ),
        )
        if self.repository.replace(food_id, updated) is None:
            raise NotFoundError("Food not found")
        _logger.info("Food updated: id=%s", food_id)
        return updated

    def delete_food(self, raw_id: object) -> DeletionResult:
        """Remove a food permanently."""
        food_id = validate_identifier(raw_id)
        if not self.repository.exists(food_id):
            raise NotFoundError("Food not found")
        self.repository.delete(food_id)
        _logger.info("Food deleted: id=%s", food_id)
        return DeletionResult(message="Food deleted successfully")

    def count_foods(self) -> int:
        """Return how many foods are registered."""
        return self.repository.count()


def _micronutrients(
    items: list[MicronutrientPayload],
) -> tuple[Micronutrient, ...]:
    return tuple(
        Micronutrient(name=item.name, quantity=item.quantity, unit=item.unit)
        for item in items
    )


def _build_record(
    food_id: int,
    payload: FoodPayload,
    *,
    registered_at: datetime,
    vitamins: tuple[Micronutrient, ...],
    minerals: tuple[Micronutrient, ...],
) -> FoodRecord:
    """Materialize a record from a validated payload."""
    return FoodRecord(
        id=food_id,
        name=payload.name,
        description=payload.description,
        serving_size=payload.serving_size,
        unit=payload.unit,
        calories=payload.calories,
        carbohydrates=payload.carbohydrates,
        protein=payload.protein,
        total_fat=payload.total_fat,
        saturated_fat=payload.saturated_fat,
        trans_fat=payload.trans_fat,
        fiber=payload.fiber,
        sodium=payload.sodium,
        sugars=payload.sugars,
        vitamins=vitamins,
        minerals=minerals,
        category=payload.category,
        source=payload.source,
        barcode=payload.barcode,
        brand=payload.brand,
        registered_at=registered_at,
    )
