"""`active-model` command-line interface.

Commands:
- `path`: resource paths (or full URLs) for model names.
- `errors`: classify a status + JSON body the way the adapter would.
- `doctor`: settings and connectivity checks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pydantic
import typer
from rich.console import Console

from adapters.active_model_adapter import ActiveModelAdapter
from adapters.rest_adapter import RESTAdapter
from cli import doctor
from cli.ui_components import build_error_panel, build_errors_table, build_paths_table
from core.config import AppSettings
from core.domain.errors import AdapterError, InvalidArgumentError, InvalidError, MalformedErrorPayload
from core.domain.models import ResponseEnvelope
from core.logging import configure_logging

EXIT_INVALID = 1
EXIT_ADAPTER_ERROR = 2
EXIT_MALFORMED = 3

app = typer.Typer(
    no_args_is_help=True,
    help="Rails-style naming and validation-error translation for REST adapters.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_adapter(settings: AppSettings | None = None) -> ActiveModelAdapter:
    settings = settings or AppSettings()
    return ActiveModelAdapter(RESTAdapter(settings), settings=settings)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override ACTIVE_MODEL_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level, settings.log_format)


@app.command()
def path(
    model_names: list[str] = typer.Argument(..., help="Model type names, e.g. famousPerson."),
    url: bool = typer.Option(False, "--url", help="Print full URLs instead of paths."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object instead of a table."),
) -> None:
    """Print the resource path for each model name."""

    adapter = build_adapter()
    try:
        rows = [(name, adapter.build_url(name) if url else adapter.path_for_type(name)) for name in model_names]
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if as_json:
        typer.echo(json.dumps(dict(rows), ensure_ascii=False))
        return
    _console.print(build_paths_table(rows))


def _read_payload(source: Optional[Path]) -> Any:
    if source is None or str(source) == "-":
        raw = typer.get_text_stream("stdin").read()
    else:
        raw = source.read_text(encoding="utf-8")
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"payload is not valid JSON: {exc}") from exc


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"header must look like 'Name: value', got {value!r}")
        headers[name.strip()] = content.strip()
    return headers


@app.command()
def errors(
    payload_file: Optional[Path] = typer.Argument(None, help="JSON body file ('-' or omitted: stdin)."),
    status: int = typer.Option(422, "--status", "-s", help="HTTP status of the response."),
    header: Optional[list[str]] = typer.Option(None, "--header", "-H", help="Response header, 'Name: value'."),
    as_json: bool = typer.Option(False, "--json", help="Machine readable output."),
) -> None:
    """Classify a response body; exit 1 on validation errors, 2 on other failures."""

    try:
        envelope = ResponseEnvelope(
            status=status,
            headers=_parse_headers(header or []),
            payload=_read_payload(payload_file),
        )
    except pydantic.ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    adapter = build_adapter()

    try:
        result = adapter.handle_response(envelope.status, envelope.headers, envelope.payload)
    except MalformedErrorPayload as exc:
        _console.print(f"[red]Malformed error payload:[/red] {exc}")
        raise typer.Exit(code=EXIT_MALFORMED) from exc

    if isinstance(result, InvalidError):
        if as_json:
            typer.echo(json.dumps([e.model_dump() for e in result.errors], ensure_ascii=False))
        else:
            _console.print(build_errors_table(result))
        raise typer.Exit(code=EXIT_INVALID)

    if isinstance(result, AdapterError):
        if as_json:
            typer.echo(json.dumps({"error": type(result).__name__, "message": str(result), "status": result.status}))
        else:
            _console.print(build_error_panel(result))
        raise typer.Exit(code=EXIT_ADAPTER_ERROR)

    typer.echo(json.dumps(result, ensure_ascii=False, indent=None if as_json else 2))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
