"""Command line interface (Typer + Rich).

Commands:
- `today`: build one payload and print it (Rich or JSON).
- `serve`: run the HTTP API under uvicorn.
- `doctor`: diagnostics and AI provider setup.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_payload_json
from adapters.openai_generator import OpenAITextGenerator
from api.app import create_app
from cli import doctor
from cli.ui_components import build_answer_panel, build_clues_table, print_banner
from core.config import AppSettings
from core.services.daily_pipeline import build_daily_payload

app = typer.Typer(no_args_is_help=True, help="Daily object guessing game: secret word and five clues.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.command()
def today(
    as_json: bool = typer.Option(False, "--json", help="Print the payload as JSON (no banner)."),
    reveal: bool = typer.Option(False, "--reveal", help="Show the secret word."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the payload to a JSON file."),
) -> None:
    """Generate today's word and clues once."""

    settings = AppSettings()
    configure_logging(settings.log_level)

    payload = asyncio.run(build_daily_payload(generator=OpenAITextGenerator(settings), settings=settings))

    if as_json:
        typer.echo(json.dumps(payload.model_dump(mode="json"), ensure_ascii=False))
    else:
        print_banner(_console)
        _console.print(build_clues_table(payload))
        _console.print(build_answer_panel(payload, reveal=reveal))

    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        if not as_json:
            _console.print(f"[green]Saved payload to:[/green] {path}")


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: settings.host)."),
    port: int | None = typer.Option(None, help="Port (default: settings.port)."),
) -> None:
    """Serve GET /api/daily."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    app()
