"""Food CRUD endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Request, status

from food_catalog.api.food_models import (
    DeletionResponse,
    FoodResponse,
    FoodSummaryResponse,
)
from food_catalog.services.validation import food_payload_schema

if TYPE_CHECKING:
    from food_catalog.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


def success(data: object) -> dict[str, object]:
    """Wrap a payload in the success envelope."""
    return {"success": True, "data": data}


@router.get("")
def list_foods(request: Request) -> dict[str, object]:
    """Return the summary of every registered food."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_foods()
    return success([FoodSummaryResponse.model_validate(f).to_json() for f in foods])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_food(request: Request, body: Any = Body(default=None)) -> dict[str, object]:  # noqa: B008
    """Register a new food."""
    container: AppContainer = request.app.state.container
    record = container.food_service.create_food(body)
    return success(FoodResponse.model_validate(record).to_json())


@router.get("/schema")
def payload_schema() -> dict[str, object]:
    """Return the JSON Schema that create and update payloads must satisfy."""
    return success(food_payload_schema())


@router.get("/{food_id}")
def get_food(food_id: str, request: Request) -> dict[str, object]:
    """Return a single food with its full nutritional data."""
    container: AppContainer = request.app.state.container
    record = container.food_service.get_food(food_id)
    return success(FoodResponse.model_validate(record).to_json())


@router.put("/{food_id}")
def update_food(
    food_id: str,
    request: Request,
    body: Any = Body(default=None),  # noqa: B008
) -> dict[str, object]:
    """Replace a food's nutritional data."""
    container: AppContainer = request.app.state.container
    record = container.food_service.update_food(food_id, body)
    return success(FoodResponse.model_validate(record).to_json())


@router.delete("/{food_id}")
def delete_food(food_id: str, request: Request) -> dict[str, object]:
    """Remove a food."""
    container: AppContainer = request.app.state.container
    result = container.food_service.delete_food(food_id)
    return success(DeletionResponse.model_validate(result).to_json())
