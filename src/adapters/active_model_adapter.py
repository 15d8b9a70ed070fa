"""Adapter for Rails-style JSON APIs (ActiveModel::Serializers conventions).

Overrides exactly two integration points of the wrapped base adapter:

- `path_for_type`: underscored, pluralized resource paths
  (`famousPerson` -> `famous_people`).
- `handle_response`: 422 Unprocessable Entity responses become an
  `InvalidError` with one `ValidationError` per (field, message) pair.

Everything else is delegated to the base adapter unchanged.

Expected error payload:

    {"errors": {"first_name": ["can't be blank"], "last_name": ["is invalid"]}}
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from core.config import AppSettings
from core.domain.errors import InvalidArgumentError, InvalidError, MalformedErrorPayload
from core.domain.models import ValidationError
from core.inflector import Inflector
from core.interfaces.adapter import BaseAdapter
from core.strings import decamelize, underscore

InvalidPredicate = Callable[[int, Mapping[str, str], Any], bool]


def errors_hash_to_array(errors: Any) -> list[ValidationError]:
    """Flatten `{field: [messages]}` into ordered `ValidationError`s.

    A bare string counts as a single message. Raises `MalformedErrorPayload`
    for anything that is not a mapping of field -> message(s).
    """

    if not isinstance(errors, Mapping):
        raise MalformedErrorPayload(
            f"expected an 'errors' mapping, got {type(errors).__name__}",
            payload=errors,
        )

    out: list[ValidationError] = []
    for field, messages in errors.items():
        if isinstance(messages, str):
            messages = [messages]
        if not isinstance(messages, (list, tuple)):
            raise MalformedErrorPayload(
                f"messages for {field!r} must be a string or a list of strings",
                payload=errors,
            )
        for message in messages:
            if not isinstance(message, str):
                raise MalformedErrorPayload(
                    f"non-string message for {field!r}: {message!r}",
                    payload=errors,
                )
            out.append(ValidationError(field=str(field), message=message))
    return out


class ActiveModelAdapter:
    """Naming layer composed over a `BaseAdapter`.

    `is_invalid` may be replaced for APIs that signal validation failures
    differently; by default any status in `settings.invalid_statuses`
    (`[422]`) counts.
    """

    def __init__(
        self,
        base: BaseAdapter,
        *,
        inflector: Inflector | None = None,
        is_invalid: InvalidPredicate | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.base = base
        self.inflector = inflector or Inflector.from_settings(self._settings)
        self._is_invalid = is_invalid

    def path_for_type(self, model_name: str) -> str:
        """`famousPerson` -> `famous_people`."""

        if not isinstance(model_name, str) or not model_name.strip():
            raise InvalidArgumentError(f"model name must be a non-empty string, got {model_name!r}")

        decamelized = decamelize(model_name)
        underscored = underscore(decamelized)
        if not underscored:
            raise InvalidArgumentError(f"model name has no word characters: {model_name!r}")
        return self.inflector.pluralize(underscored)

    def is_invalid(self, status: int, headers: Mapping[str, str], payload: Any) -> bool:
        if self._is_invalid is not None:
            return self._is_invalid(status, headers, payload)
        return status in self._settings.invalid_statuses

    def handle_response(
        self,
        status: int,
        headers: Mapping[str, str],
        payload: Any,
        request_data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Return an `InvalidError` for validation failures, else delegate."""

        if not self.is_invalid(status, headers, payload):
            return self.base.handle_response(status, headers, payload, request_data)

        if not isinstance(payload, Mapping) or "errors" not in payload:
            raise MalformedErrorPayload(
                f"status {status} response has no 'errors' key",
                payload=payload,
            )

        return InvalidError(errors_hash_to_array(payload["errors"]), status=status, payload=payload)

    # Forwarded base behaviour, with this adapter's naming/response handling.

    def build_url(self, model_name: str, id: str | int | None = None) -> str:
        return self.base.build_url(model_name, id, via=self)  # type: ignore[attr-defined]

    async def find_record(self, model_name: str, id: str | int) -> Any:
        return await self.base.find_record(model_name, id, via=self)  # type: ignore[attr-defined]

    async def find_all(self, model_name: str) -> Any:
        return await self.base.find_all(model_name, via=self)  # type: ignore[attr-defined]

    async def query(self, model_name: str, params: Mapping[str, Any]) -> Any:
        return await self.base.query(model_name, params, via=self)  # type: ignore[attr-defined]

    async def create_record(self, model_name: str, data: Any) -> Any:
        return await self.base.create_record(model_name, data, via=self)  # type: ignore[attr-defined]

    async def update_record(self, model_name: str, id: str | int, data: Any) -> Any:
        return await self.base.update_record(model_name, id, data, via=self)  # type: ignore[attr-defined]

    async def delete_record(self, model_name: str, id: str | int) -> Any:
        return await self.base.delete_record(model_name, id, via=self)  # type: ignore[attr-defined]
