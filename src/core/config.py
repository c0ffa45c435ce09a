"""Core configuration.

Responsibility:
- Centralizes environment variables (pydantic-settings) away from the CLI and the HTTP app.
- Lets adapters (AI client, HTTP probes) read config consistently.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory: `$XDG_CONFIG_HOME/daily-object` or `~/.config/daily-object`."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "daily-object"
    return Path.home() / ".config" / "daily-object"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# daily-object user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be set as `DAILY_OBJECT_<FIELD>` in the environment or in
    one of the `.env` files. The API key is also read from plain `OPENAI_API_KEY`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DAILY_OBJECT_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    ai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DAILY_OBJECT_AI_API_KEY", "OPENAI_API_KEY", "ai_api_key"),
        description="API key for the OpenAI-compatible provider.",
    )
    ai_base_url: str = Field(
        default="https://api.openai.com/v1",
        min_length=8,
        description="OpenAI-compatible base URL.",
    )
    ai_model: str = Field(
        default="gpt-4o-mini",
        min_length=1,
        description="Model used for both the word and the clue calls.",
    )
    ai_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for each call to the AI provider (seconds).",
    )
    ai_max_retries: int = Field(
        default=0,
        ge=0,
        le=10,
        description="Automatic SDK retries. Zero: failures go straight to the fallback content.",
    )
    ai_structured_output: bool = Field(
        default=True,
        description="Request a strict json_schema response for the clue call.",
    )

    word_temperature: float = Field(default=0.8, ge=0.0, le=2.0)
    word_max_tokens: int = Field(default=10, ge=1)
    clue_temperature: float = Field(default=0.7, ge=0.0, le=2.0)

    cache_per_day: bool = Field(
        default=False,
        description="Reuse the first payload without fallback content built for a date, for the rest of that date (in memory).",
    )

    host: str = Field(default="127.0.0.1", min_length=1)
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO", description="Root logging level for the CLI/server.")
