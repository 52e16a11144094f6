"""Domain models for the food catalog."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class FoodUnit(StrEnum):
    """Unit a serving size is measured in."""

    GRAMS = "g"
    MILLILITERS = "ml"
    UNIT = "unit"


class FoodCategory(StrEnum):
    """Closed set of food categories."""

    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    MEATS = "meats"
    DAIRY = "dairy"
    GRAINS = "grains"
    BEVERAGES = "beverages"
    PROCESSED = "processed"
    OTHER = "other"


class FoodLimits:
    """Length limits shared by every validator of food payloads."""

    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 100
    DESCRIPTION_MAX_LENGTH = 500
    SOURCE_MAX_LENGTH = 200
    BARCODE_MAX_LENGTH = 50
    BRAND_MAX_LENGTH = 100
    MICRONUTRIENT_NAME_MAX_LENGTH = 100
    MICRONUTRIENT_UNIT_MAX_LENGTH = 20


@dataclass(frozen=True)
class Micronutrient:
    """A vitamin or mineral quantity attached to a food."""

    name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class FoodRecord:
    """A registered food with its full nutritional data."""

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
    vitamins: tuple[Micronutrient, ...]
    minerals: tuple[Micronutrient, ...]
    category: FoodCategory
    source: str | None
    barcode: str | None
    brand: str | None
    registered_at: datetime


@dataclass(frozen=True)
class FoodSummary:
    """Condensed view of a food used by listings."""

    id: int
    name: str
    calories: float
    category: FoodCategory
    registered_at: datetime


@dataclass(frozen=True)
class DeletionResult:
    """Confirmation returned after a food is removed."""

    message: str
