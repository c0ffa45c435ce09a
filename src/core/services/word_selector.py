"""Secret word selection.

Asks the text generator for one everyday object and normalizes the reply.
Never fails outward: any problem resolves to `DEFAULT_WORD`.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.fallbacks import DEFAULT_WORD
from core.domain.models import SamplingConfig
from core.interfaces.text_generator import TextGenerator

logger = logging.getLogger(__name__)

WORD_INSTRUCTIONS = (
    "You are a creative object generator for a guessing game. "
    "Generate a single everyday object that people would recognize.\n"
    "Rules:\n"
    "1. Choose objects that are physical and tangible\n"
    "2. Avoid abstract concepts or ideas\n"
    "3. Pick something that exists in most households or is commonly known\n"
    "4. The object should be a single word, no spaces\n"
    "5. The object should be interesting enough to describe with multiple clues\n"
    "6. Avoid very simple objects like 'pen' or very complex ones like 'supercomputer'\n\n"
    "Respond with just the object name in uppercase, nothing else."
)

_WRAPPING_CHARS = "\"'`*.!,;:"


def normalize_word(raw: str | None) -> str | None:
    """Trim and uppercase a generator reply; None when it is not a single token."""

    if not raw:
        return None
    word = raw.strip().strip(_WRAPPING_CHARS).strip().upper()
    if not word or any(ch.isspace() for ch in word):
        return None
    return word


async def select_word_reporting(
    generator: TextGenerator,
    settings: AppSettings | None = None,
) -> tuple[str, bool]:
    """Like `select_word`, plus whether `DEFAULT_WORD` was substituted."""

    settings = settings or AppSettings()
    config = SamplingConfig(
        temperature=settings.word_temperature,
        max_tokens=settings.word_max_tokens,
    )
    try:
        raw = await generator.complete(WORD_INSTRUCTIONS, config)
    except Exception as exc:
        logger.warning("Word generation failed (%s: %s); using %s", type(exc).__name__, exc, DEFAULT_WORD)
        return DEFAULT_WORD, True

    word = normalize_word(raw)
    if word is None:
        logger.warning("Word generation returned unusable content %r; using %s", raw, DEFAULT_WORD)
        return DEFAULT_WORD, True
    return word, False


async def select_word(generator: TextGenerator, settings: AppSettings | None = None) -> str:
    word, _ = await select_word_reporting(generator, settings)
    return word
