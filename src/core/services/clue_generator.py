"""Clue generation for a secret word.

Responsibility:
- Ask the text generator for five clues, most abstract first.
- Parse the reply (JSON array first, line splitting as recovery).
- Normalize to exactly five clues, or serve the fixed fallback set on call failure.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from core.config import AppSettings
from core.domain.fallbacks import fallback_clues, padding_clue
from core.domain.models import CLUE_COUNT, SamplingConfig
from core.interfaces.text_generator import TextGenerator

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def build_clue_instructions(word: str) -> str:
    return (
        f'You are a creative clue generator for an object guessing game. Generate 5 clues for the object "{word}".\n'
        "The clues should start very abstract and become progressively more specific.\n"
        "Clue 1: Should be about its general purpose or category\n"
        "Clue 2: Should describe how people interact with it\n"
        "Clue 3: Should mention a distinctive feature or characteristic\n"
        "Clue 4: Should give a more specific physical description\n"
        "Clue 5: Should be quite specific but still not give it away completely\n\n"
        "Each clue should be a single sentence.\n"
        "Don't mention the object's name or too obvious characteristics in early clues.\n"
        "Format the response as a JSON array of strings."
    )


def _string_items(value: Any) -> list[str]:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    if isinstance(value, dict):
        # Structured output wraps the array, e.g. {"clues": [...]}.
        for item in value.values():
            if isinstance(item, list):
                return _string_items(item)
        return []
    if isinstance(value, str):
        return [value]
    return []


def _parse_structured(raw: str) -> list[str] | None:
    text = raw.strip()
    match = _JSON_FENCE_RE.search(text)
    if match:
        text = match.group(1)
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return _string_items(data)


def parse_clues(raw: str | None) -> list[str]:
    """Turn a raw generator reply into a list of non-blank clues.

    Decodable JSON (optionally inside a ```json fence) contributes its string
    items: a list is filtered to its strings, an object yields its first list
    value. Only text that is not JSON at all is split by line breaks.
    """

    if not raw:
        return []
    items = _parse_structured(raw)
    if items is None:
        logger.info("Clue reply is not JSON; splitting by lines")
        items = raw.splitlines()
    return [item.strip() for item in items if item.strip()]


def normalize_clues(clues: list[str], word: str) -> list[str]:
    """Pad with first-letter clues or truncate so exactly five remain."""

    out = list(clues[:CLUE_COUNT])
    while len(out) < CLUE_COUNT:
        out.append(padding_clue(word))
    return out


async def generate_clues_reporting(
    generator: TextGenerator,
    word: str,
    settings: AppSettings | None = None,
) -> tuple[list[str], bool]:
    """Like `generate_clues`, plus whether the fixed fallback set was served."""

    settings = settings or AppSettings()
    config = SamplingConfig(
        temperature=settings.clue_temperature,
        response_shape="string_array",
    )
    try:
        raw = await generator.complete(build_clue_instructions(word), config)
    except Exception as exc:
        logger.warning("Clue generation failed for %s (%s: %s); serving fallback clues", word, type(exc).__name__, exc)
        return fallback_clues(word), True

    clues = parse_clues(raw)
    if len(clues) != CLUE_COUNT:
        logger.info("Clue reply had %d clues for %s; normalizing to %d", len(clues), word, CLUE_COUNT)
    return normalize_clues(clues, word), False


async def generate_clues(
    generator: TextGenerator,
    word: str,
    settings: AppSettings | None = None,
) -> list[str]:
    clues, _ = await generate_clues_reporting(generator, word, settings)
    return clues
