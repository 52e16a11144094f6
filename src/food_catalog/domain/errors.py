"""Errors raised by the food catalog services."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated constraint on an input field."""

    field: str
    message: str


class ServiceError(Exception):
    """Base class for expected, caller-recoverable failures."""

    code = "SERVICE_ERROR"
    status_code = 500

    def __init__(self, message: str, details: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = list(details) if details else []


class ValidationError(ServiceError):
    """Input is malformed or violates a business rule."""

    code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(ServiceError):
    """The referenced food does not exist."""

    code = "NOT_FOUND"
    status_code = 404
