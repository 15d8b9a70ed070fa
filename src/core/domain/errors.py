"""Adapter error taxonomy.

`handle_response` implementations *return* these for failed responses; the
transport (`RESTAdapter.request`) is the only place that raises them. Callers
branch on the class (`InvalidError` vs. the rest) instead of re-reading
status codes.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.domain.models import ValidationError


class AdapterError(Exception):
    """Base class for any failed adapter request."""

    default_message = "Adapter operation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.status = status
        self.payload = payload


class InvalidError(AdapterError):
    """The server understood the request but rejected it during validation."""

    default_message = "The adapter rejected the commit because it was invalid"

    def __init__(
        self,
        errors: Iterable[ValidationError] = (),
        message: str | None = None,
        *,
        status: int | None = 422,
        payload: Any = None,
    ) -> None:
        super().__init__(message, status=status, payload=payload)
        self.errors: list[ValidationError] = list(errors)

    def errors_for(self, field: str) -> list[str]:
        return [error.message for error in self.errors if error.field == field]

    def as_dict(self) -> dict[str, list[str]]:
        """Group messages back by field, keeping first-seen field order."""

        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class UnauthorizedError(AdapterError):
    default_message = "The adapter operation is unauthorized"


class ForbiddenError(AdapterError):
    default_message = "The adapter operation is forbidden"


class NotFoundError(AdapterError):
    default_message = "The adapter could not find the resource"


class ConflictError(AdapterError):
    default_message = "The adapter operation failed due to a conflict"


class ServerError(AdapterError):
    default_message = "The adapter operation failed due to a server error"


class AdapterTimeoutError(AdapterError):
    default_message = "The adapter operation timed out"


class InvalidArgumentError(ValueError):
    """A caller passed something that cannot be turned into a resource path."""


class MalformedErrorPayload(ValueError):
    """A validation-failure response did not carry a usable `errors` mapping."""

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload
