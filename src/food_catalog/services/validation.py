"""Validation rules for food payloads and identifiers.

The pydantic models below are the single definition of what an admissible food
looks like. The service validates through them and the HTTP layer publishes
their JSON Schema so clients can reuse the same rules.
"""

from typing import Annotated

import pydantic
from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel

from food_catalog.domain.errors import FieldError, ValidationError
from food_catalog.domain.foods import FoodCategory, FoodLimits, FoodUnit

NonNegativeNumber = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
PositiveNumber = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]


class MicronutrientPayload(BaseModel):
    """Vitamin or mineral entry supplied by a caller."""

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)

    name: str = Field(
        min_length=1, max_length=FoodLimits.MICRONUTRIENT_NAME_MAX_LENGTH
    )
    quantity: NonNegativeNumber
    unit: str = Field(
        min_length=1, max_length=FoodLimits.MICRONUTRIENT_UNIT_MAX_LENGTH
    )


class FoodPayload(BaseModel):
    """Full food payload accepted on create and on update."""

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)

    name: str = Field(
        min_length=FoodLimits.NAME_MIN_LENGTH, max_length=FoodLimits.NAME_MAX_LENGTH
    )
    description: Annotated[
        str, Field(max_length=FoodLimits.DESCRIPTION_MAX_LENGTH)
    ] | None = None
    serving_size: PositiveNumber
    unit: FoodUnit
    calories: NonNegativeNumber
    carbohydrates: NonNegativeNumber
    protein: NonNegativeNumber
    total_fat: NonNegativeNumber
    saturated_fat: NonNegativeNumber | None = None
    trans_fat: NonNegativeNumber | None = None
    fiber: NonNegativeNumber | None = None
    sodium: NonNegativeNumber | None = None
    sugars: NonNegativeNumber | None = None
    vitamins: list[MicronutrientPayload] = Field(default_factory=list)
    minerals: list[MicronutrientPayload] = Field(default_factory=list)
    category: FoodCategory
    source: Annotated[str, Field(max_length=FoodLimits.SOURCE_MAX_LENGTH)] | None = None
    barcode: Annotated[
        str, Field(max_length=FoodLimits.BARCODE_MAX_LENGTH, pattern=r"^\d*$")
    ] | None = None
    brand: Annotated[str, Field(max_length=FoodLimits.BRAND_MAX_LENGTH)] | None = None


class IdentifierParams(BaseModel):
    """Path identifier of a food."""

    id: PositiveInt


# (dependent field, bounding field, message)
_INVARIANTS = (
    ("saturated_fat", "total_fat", "Saturated fat cannot exceed total fat"),
    ("trans_fat", "total_fat", "Trans fat cannot exceed total fat"),
    ("sugars", "carbohydrates", "Sugars cannot exceed carbohydrates"),
)


def validate_identifier(raw: object) -> int:
    """Coerce a raw identifier to a positive integer."""
    try:
        params = IdentifierParams.model_validate({"id": raw})
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid ID", _field_errors(exc)) from exc
    return params.id


def validate_create(raw: object) -> FoodPayload:
    """Validate a payload for registering a new food."""
    return _validate_food(raw)


def validate_update(raw: object) -> FoodPayload:
    """Validate a full replacement payload for an existing food.

    Updates use the create rule set in full; there is no partial update.
    """
    return _validate_food(raw)


def check_invariants(payload: FoodPayload) -> list[FieldError]:
    """Return every violated cross-field rule, naming the dependent field."""
    errors: list[FieldError] = []
    for dependent, bound, message in _INVARIANTS:
        value = getattr(payload, dependent)
        if value is not None and value > getattr(payload, bound):
            errors.append(FieldError(field=to_camel(dependent), message=message))
    return errors


def food_payload_schema() -> dict[str, object]:
    """Return the JSON Schema of the food payload, keyed by wire names."""
    return FoodPayload.model_json_schema(by_alias=True)


def _validate_food(raw: object) -> FoodPayload:
    try:
        payload = FoodPayload.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ValidationError("Validation failed", _field_errors(exc)) from exc
    violations = check_invariants(payload)
    if violations:
        raise ValidationError("Validation failed", violations)
    return payload


def _field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    """Flatten pydantic errors into field path and message pairs."""
    return [
        FieldError(
            field=".".join(str(part) for part in error["loc"]) or "body",
            message=error["msg"],
        )
        for error in exc.errors()
    ]
