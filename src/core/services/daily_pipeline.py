"""Daily payload orchestration.

Composes the two generation stages for one request: date tag, then the word,
then the clues for that word. Entry-points (HTTP route, CLI) only call
`build_daily_payload` or go through `DailyPayloadCache`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime

from core.config import AppSettings
from core.domain.fallbacks import fallback_clues
from core.domain.models import DailyPayload
from core.interfaces.text_generator import TextGenerator
from core.services.clue_generator import generate_clues_reporting
from core.services.word_selector import select_word_reporting

logger = logging.getLogger(__name__)


def date_tag(now: datetime | None = None) -> str:
    """YEAR-MONTH-DAY label from local wall-clock time, without zero padding."""

    now = now or datetime.now()
    return f"{now.year}-{now.month}-{now.day}"


@dataclass
class DailyResult:
    """A built payload and whether any stage served fallback content."""

    payload: DailyPayload
    degraded: bool = False


async def build_daily_result(
    *,
    generator: TextGenerator,
    settings: AppSettings | None = None,
    now: datetime | None = None,
) -> DailyResult:
    settings = settings or AppSettings()
    date = date_tag(now)
    word, word_degraded = await select_word_reporting(generator, settings)

    try:
        clues, clues_degraded = await generate_clues_reporting(generator, word, settings)
    except Exception:
        logger.exception("Unexpected error while generating clues for %s", word)
        clues, clues_degraded = fallback_clues(word), True

    return DailyResult(
        payload=DailyPayload(date=date, clues=clues, word=word),
        degraded=word_degraded or clues_degraded,
    )


async def build_daily_payload(
    *,
    generator: TextGenerator,
    settings: AppSettings | None = None,
    now: datetime | None = None,
) -> DailyPayload:
    result = await build_daily_result(generator=generator, settings=settings, now=now)
    return result.payload


@dataclass
class DailyPayloadCache:
    """In-memory, process-local memo of the payload for the current date tag.

    Only the latest date is kept; a new date tag replaces it. Payloads holding
    fallback content are served but never stored, so the next request retries.
    """

    generator: TextGenerator
    settings: AppSettings = field(default_factory=AppSettings)
    _payload: DailyPayload | None = field(default=None, init=False, repr=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    async def get(self, now: datetime | None = None) -> DailyPayload:
        tag = date_tag(now)
        async with self._lock:
            if self._payload is not None and self._payload.date == tag:
                return self._payload
            result = await build_daily_result(generator=self.generator, settings=self.settings, now=now)
            if result.degraded:
                logger.warning("Daily payload for %s used fallback content; not caching", tag)
                return result.payload
            logger.info("Cached daily payload for %s", tag)
            self._payload = result.payload
            return result.payload

    def clear(self) -> None:
        self._payload = None
