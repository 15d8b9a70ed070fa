"""Domain models (pydantic v2).

These describe *what* crosses the adapter boundary: the response envelope
handed over by the transport and the field-level validation errors extracted
from a Rails `{"errors": {...}}` payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

BASE_ERROR_FIELD = "base"


class ValidationError(BaseModel):
    """A single (field, message) pair rejected by server-side validation.

    `pointer` and `title` mirror the JSON API error object, so callers that
    speak JSON API can map errors onto model attributes without knowing
    the Rails payload shape.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(
        ...,
        description="Attribute name as sent by the server (e.g. 'first_name').",
    )
    message: str = Field(
        ...,
        description="Human readable message (e.g. \"can't be blank\").",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        return "Invalid Document" if self.field == BASE_ERROR_FIELD else "Invalid Attribute"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def pointer(self) -> str:
        if self.field == BASE_ERROR_FIELD:
            return "/data"
        return f"/data/attributes/{self.field}"


class ResponseEnvelope(BaseModel):
    """An HTTP response as seen by the adapter (already JSON-decoded)."""

    status: int = Field(
        ...,
        ge=100,
        le=599,
        description="HTTP status code.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Response headers. Use `header()` for case-insensitive lookups.",
    )
    payload: Any = Field(
        default=None,
        description="Decoded body; `None` for empty responses.",
    )

    def header(self, name: str, default: str | None = None) -> str | None:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default
