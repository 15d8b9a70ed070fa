"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • settings       - AppSettings that ignore any .env file
  • fake_base      - FakeBaseAdapter recording every delegated call
  • adapter        - ActiveModelAdapter wrapping ``fake_base``
"""

from __future__ import annotations

import os
import sys
from typing import Any, Mapping

import pytest

# Ensure src/ is importable even without an editable install.
SRC_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from adapters.active_model_adapter import ActiveModelAdapter  # noqa: E402
from core.config import AppSettings  # noqa: E402


class FakeBaseAdapter:
    """Stands in for the base adapter: records calls, returns a sentinel."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, Mapping[str, str], Any, Any]] = []
        self.result: Any = object()

    def path_for_type(self, model_name: str) -> str:
        return f"base/{model_name}"

    def handle_response(
        self,
        status: int,
        headers: Mapping[str, str],
        payload: Any,
        request_data: Mapping[str, Any] | None = None,
    ) -> Any:
        self.calls.append((status, headers, payload, request_data))
        return self.result


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_base() -> FakeBaseAdapter:
    return FakeBaseAdapter()


@pytest.fixture
def adapter(fake_base: FakeBaseAdapter, settings: AppSettings) -> ActiveModelAdapter:
    return ActiveModelAdapter(fake_base, settings=settings)
