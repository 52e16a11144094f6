"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_catalog.api.foods import router as foods_router
from food_catalog.app_logging import configure_logging
from food_catalog.config import normalize_prefix
from food_catalog.containers import AppContainer
from food_catalog.domain.errors import FieldError, ServiceError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=container.settings.app_name)
    app.state.container = container

    app.include_router(
        foods_router, prefix=normalize_prefix(container.settings.api_prefix)
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(
        request: Request, exc: ServiceError
    ) -> JSONResponse:
        logger.info(
            "Request rejected: %s %s -> %s",
            request.method,
            request.url.path,
            exc.code,
        )
        return _error_response(exc.status_code, exc.code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            FieldError(
                field=".".join(str(part) for part in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ValidationError.code,
            "Validation failed",
            details,
        )

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {"status": "ok", "foods": state_container.food_service.count_foods()}

    return app


def _error_response(
    status_code: int, code: str, message: str, details: list[FieldError]
) -> JSONResponse:
    """Render a failure in the error envelope."""
    error: dict[str, object] = {"code": code, "message": message}
    if details:
        error["details"] = [
            {"field": detail.field, "message": detail.message} for detail in details
        ]
    return JSONResponse(
        status_code=status_code, content={"success": False, "error": error}
    )
