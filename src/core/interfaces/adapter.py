"""Contract of the base REST adapter the naming layer delegates to.

Why Protocol:
- Structural contract (duck typing), no inheritance required.
- A fake base adapter in tests only needs these two methods.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class BaseAdapter(Protocol):
    """Minimal surface `ActiveModelAdapter` needs from the adapter it wraps.

    Rules:
    - `path_for_type` is pure: same model name, same path.
    - `handle_response` returns the payload for a successful response and an
      `AdapterError` instance for a failed one (it does not raise).
    """

    def path_for_type(self, model_name: str) -> str:
        ...

    def handle_response(
        self,
        status: int,
        headers: Mapping[str, str],
        payload: Any,
        request_data: Mapping[str, Any] | None = None,
    ) -> Any:
        ...
