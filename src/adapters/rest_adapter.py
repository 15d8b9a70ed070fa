"""Base REST adapter.

Default conventions of a JSON REST API (camelized, pluralized paths) and the
default status-code -> error classification. `ActiveModelAdapter` wraps an
instance of this class and overrides only the naming and the 422 handling.

Methods that build URLs or interpret responses accept `via`, the adapter
whose `path_for_type` / `handle_response` should be used. A wrapping adapter
passes itself, so its overrides apply without subclassing.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    AdapterError,
    AdapterTimeoutError,
    ConflictError,
    ForbiddenError,
    InvalidError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from core.inflector import Inflector
from core.interfaces.adapter import BaseAdapter
from core.logging import get_logger
from core.strings import camelize

logger = get_logger(__name__)

_STATUS_ERRORS: dict[int, type[AdapterError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


class RESTAdapter:
    """Reference base adapter: paths, URLs, response classification, transport."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        host: str | None = None,
        namespace: str | None = None,
        headers: dict[str, str] | None = None,
        inflector: Inflector | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.host = (host if host is not None else self._settings.host).rstrip("/")
        self.namespace = (namespace if namespace is not None else self._settings.namespace).strip("/")
        self.headers = dict(headers or {})
        self.inflector = inflector or Inflector.from_settings(self._settings)
        self._transport = transport

    # Naming

    def path_for_type(self, model_name: str) -> str:
        """`famousPerson` -> `famousPeople`."""

        return self.inflector.pluralize(camelize(model_name))

    def url_prefix(self) -> str:
        parts = [part for part in (self.host, self.namespace) if part]
        return "/".join(parts)

    def build_url(
        self,
        model_name: str,
        id: str | int | None = None,
        *,
        via: BaseAdapter | None = None,
    ) -> str:
        adapter = via or self
        url = f"{self.url_prefix()}/{adapter.path_for_type(model_name)}"
        if id is not None:
            url = f"{url}/{quote(str(id), safe='')}"
        return url

    # Response classification

    def is_success(self, status: int, headers: Mapping[str, str], payload: Any) -> bool:
        return 200 <= status < 300 or status == 304

    def is_invalid(self, status: int, headers: Mapping[str, str], payload: Any) -> bool:
        return status in self._settings.invalid_statuses

    def handle_response(
        self,
        status: int,
        headers: Mapping[str, str],
        payload: Any,
        request_data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Return `payload` on success, otherwise an `AdapterError` instance."""

        if self.is_success(status, headers, payload):
            return payload
        if self.is_invalid(status, headers, payload):
            return InvalidError(status=status, payload=payload)

        message = _detailed_message(status, request_data)
        error_class = _STATUS_ERRORS.get(status)
        if error_class is None and status >= 500:
            error_class = ServerError
        return (error_class or AdapterError)(message, status=status, payload=payload)

    # Transport

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        via: BaseAdapter | None = None,
    ) -> Any:
        """Perform the HTTP call and return the handled payload.

        Raises the `AdapterError` produced by `handle_response`, or
        `AdapterTimeoutError` / `AdapterError` for transport failures.
        """

        adapter = via or self
        request_data = {"method": method.upper(), "url": url}
        try:
            async with build_async_client(
                self._settings,
                extra_headers=self.headers,
                transport=self._transport,
            ) as client:
                response = await client.request(method.upper(), url, json=json, params=params)
        except httpx.TimeoutException as exc:
            raise AdapterTimeoutError(str(exc) or None) from exc
        except httpx.HTTPError as exc:
            raise AdapterError(str(exc) or None) from exc

        logger.debug("adapter.response", method=request_data["method"], url=url, status=response.status_code)
        result = adapter.handle_response(
            response.status_code,
            response.headers,
            _decode_payload(response),
            request_data,
        )
        if isinstance(result, AdapterError):
            raise result
        return result

    async def find_record(self, model_name: str, id: str | int, *, via: BaseAdapter | None = None) -> Any:
        url = self.build_url(model_name, id, via=via)
        return await self.request("GET", url, via=via)

    async def find_all(self, model_name: str, *, via: BaseAdapter | None = None) -> Any:
        url = self.build_url(model_name, via=via)
        return await self.request("GET", url, via=via)

    async def query(
        self,
        model_name: str,
        params: Mapping[str, Any],
        *,
        via: BaseAdapter | None = None,
    ) -> Any:
        url = self.build_url(model_name, via=via)
        return await self.request("GET", url, params=params, via=via)

    async def create_record(self, model_name: str, data: Any, *, via: BaseAdapter | None = None) -> Any:
        url = self.build_url(model_name, via=via)
        return await self.request("POST", url, json=data, via=via)

    async def update_record(
        self,
        model_name: str,
        id: str | int,
        data: Any,
        *,
        via: BaseAdapter | None = None,
    ) -> Any:
        url = self.build_url(model_name, id, via=via)
        return await self.request("PUT", url, json=data, via=via)

    async def delete_record(self, model_name: str, id: str | int, *, via: BaseAdapter | None = None) -> Any:
        url = self.build_url(model_name, id, via=via)
        return await self.request("DELETE", url, via=via)


def _decode_payload(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _detailed_message(status: int, request_data: Mapping[str, Any] | None) -> str:
    if not request_data:
        return f"Request returned a {status}"
    return f"Request {request_data.get('method')} {request_data.get('url')} returned a {status}"
