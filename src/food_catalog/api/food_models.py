"""Pydantic models for food API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from food_catalog.domain.foods import FoodCategory, FoodUnit


class _ResponseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    def to_json(self) -> dict[str, object]:
        """Dump with wire (camelCase) names and JSON-safe values."""
        return self.model_dump(mode="json", by_alias=True)


class MicronutrientResponse(_ResponseModel):
    """Micronutrient entry of a food."""

    name: str
    quantity: float
    unit: str


class FoodResponse(_ResponseModel):
    """Full food record."""

    id: int
    name: str
    description: str | None
    serving_size: float
    unit: FoodUnit
    calories: float
    carbohydrates: float
    protein: float
    total_fat: float
    saturated_fat: float | None
    trans_fat: float | None
    fiber: float | None
    sodium: float | None
    sugars: float | None
    vitamins: list[MicronutrientResponse]
    minerals: list[MicronutrientResponse]
    category: FoodCategory
    source: str | None
    barcode: str | None
    brand: str | None
    registered_at: datetime


class FoodSummaryResponse(_ResponseModel):
    """Food listing entry."""

    id: int
    name: str
    calories: float
    category: FoodCategory
    registered_at: datetime


class DeletionResponse(_ResponseModel):
    """Deletion confirmation."""

    message: str
