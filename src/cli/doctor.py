"""Doctor commands: environment diagnostics and AI provider setup."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import probe_url
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

PROVIDER_PRESETS: dict[str, dict[str, str]] = {
    "openai": {"DAILY_OBJECT_AI_BASE_URL": "https://api.openai.com/v1", "DAILY_OBJECT_AI_MODEL": "gpt-4o-mini"},
    "openrouter": {"DAILY_OBJECT_AI_BASE_URL": "https://openrouter.ai/api/v1", "DAILY_OBJECT_AI_MODEL": "openai/gpt-4o-mini"},
    "groq": {"DAILY_OBJECT_AI_BASE_URL": "https://api.groq.com/openai/v1", "DAILY_OBJECT_AI_MODEL": "llama-3.1-8b-instant"},
    "deepseek": {"DAILY_OBJECT_AI_BASE_URL": "https://api.deepseek.com", "DAILY_OBJECT_AI_MODEL": "deepseek-chat"},
    "ollama": {"DAILY_OBJECT_AI_BASE_URL": "http://localhost:11434/v1", "DAILY_OBJECT_AI_MODEL": "llama3"},
}


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Daily Object Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.ai_api_key:
        table.add_row("AI key", "OK", "Remote AI enabled")
    else:
        table.add_row("AI key", "MISSING", "Every request will serve the fallback word and clues")
    table.add_row("AI base_url", "OK", settings.ai_base_url)
    table.add_row("AI model", "OK", settings.ai_model)
    table.add_row(
        "Structured output",
        "ON" if settings.ai_structured_output else "OFF",
        "json_schema for clues" if settings.ai_structured_output else "plain text clues",
    )
    table.add_row("Per-day cache", "ON" if settings.cache_per_day else "OFF", "")

    ok_http, detail_http = asyncio.run(probe_url(settings.ai_base_url, settings))
    table.add_row("AI connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http or not settings.ai_api_key:
        _console.print("\n[yellow]Note:[/yellow] Run `daily-object doctor setup-ai` to store provider settings.")


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI setup (stores config in the user config .env)."""

    provider = typer.prompt("AI provider", default="openai", show_default=True).strip().lower()

    values = PROVIDER_PRESETS.get(provider, {}).copy()
    if not values:
        _console.print("[yellow]Unknown provider preset. You can still enter custom values.[/yellow]")

    base_url = typer.prompt("AI base URL", default=values.get("DAILY_OBJECT_AI_BASE_URL", ""), show_default=True).strip()
    model = typer.prompt("AI model", default=values.get("DAILY_OBJECT_AI_MODEL", ""), show_default=True).strip()
    api_key = typer.prompt("AI API key", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not model:
        raise typer.BadParameter("base_url and model are required")

    env_path = write_user_env_vars(
        {
            "DAILY_OBJECT_AI_BASE_URL": base_url,
            "DAILY_OBJECT_AI_MODEL": model,
            "DAILY_OBJECT_AI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
