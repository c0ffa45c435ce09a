import asyncio
import json
import re
from datetime import datetime
from unittest.mock import patch

import pytest

from conftest import FakeGenerator
from core.domain.fallbacks import fallback_clues
from core.services.daily_pipeline import DailyPayloadCache, build_daily_payload, build_daily_result, date_tag

CLUES = ["a", "b", "c", "d", "e"]


def test_date_tag_is_not_zero_padded():
    assert date_tag(datetime(2024, 3, 7, 23, 59)) == "2024-3-7"
    assert date_tag(datetime(2025, 12, 31)) == "2025-12-31"


def test_date_tag_uses_current_time_by_default():
    assert re.fullmatch(r"\d+-\d+-\d+", date_tag())


def test_build_daily_payload_composes_word_then_clues(settings):
    generator = FakeGenerator(word_reply="kettle", clue_reply=json.dumps(CLUES))

    payload = asyncio.run(build_daily_payload(generator=generator, settings=settings, now=datetime(2024, 1, 2)))

    assert payload.date == "2024-1-2"
    assert payload.word == "KETTLE"
    assert payload.clues == CLUES
    assert len(generator.calls) == 2
    assert '"KETTLE"' in generator.calls[1][0]


def test_both_stages_failing_yield_camera_fallback(settings, upstream_error):
    generator = FakeGenerator(word_reply=upstream_error, clue_reply=upstream_error)

    payload = asyncio.run(build_daily_payload(generator=generator, settings=settings))

    assert payload.word == "CAMERA"
    assert payload.clues == fallback_clues("CAMERA")
    assert payload.clues[4] == "I am 6 letters long"


def test_unexpected_clue_stage_error_still_returns_payload(settings):
    generator = FakeGenerator(word_reply="MUG", clue_reply=json.dumps(CLUES))

    with patch("core.services.daily_pipeline.generate_clues_reporting", side_effect=RuntimeError("bug")):
        payload = asyncio.run(build_daily_payload(generator=generator, settings=settings))

    assert payload.word == "MUG"
    assert payload.clues == fallback_clues("MUG")


def test_date_is_recomputed_per_call(settings):
    generator = FakeGenerator(word_reply="MUG", clue_reply=json.dumps(CLUES))

    first = asyncio.run(build_daily_payload(generator=generator, settings=settings, now=datetime(2024, 5, 1)))
    second = asyncio.run(build_daily_payload(generator=generator, settings=settings, now=datetime(2024, 5, 2)))

    assert first.date != second.date


@pytest.mark.parametrize(
    "clue_reply",
    ["", "[]", "not json at all", json.dumps(["x"] * 9), json.dumps({"clues": ["one"]})],
)
def test_payload_shape_invariants(settings, clue_reply):
    generator = FakeGenerator(word_reply="  vase ", clue_reply=clue_reply)

    payload = asyncio.run(build_daily_payload(generator=generator, settings=settings))

    assert len(payload.clues) == 5
    assert all(clue.strip() for clue in payload.clues)
    assert payload.word and not any(ch.isspace() for ch in payload.word)


def test_cache_reuses_payload_within_a_day(settings):
    generator = FakeGenerator(word_reply="MUG", clue_reply=json.dumps(CLUES))
    cache = DailyPayloadCache(generator=generator, settings=settings)

    async def scenario():
        first = await cache.get(now=datetime(2024, 5, 1, 8))
        second = await cache.get(now=datetime(2024, 5, 1, 20))
        return first, second

    first, second = asyncio.run(scenario())

    assert first is second
    assert len(generator.calls) == 2


def test_cache_refreshes_on_new_day(settings):
    generator = FakeGenerator(word_reply="MUG", clue_reply=json.dumps(CLUES))
    cache = DailyPayloadCache(generator=generator, settings=settings)

    async def scenario():
        first = await cache.get(now=datetime(2024, 5, 1))
        second = await cache.get(now=datetime(2024, 5, 2))
        return first, second

    first, second = asyncio.run(scenario())

    assert (first.date, second.date) == ("2024-5-1", "2024-5-2")
    assert len(generator.calls) == 4


def test_cache_clear_forces_rebuild(settings):
    generator = FakeGenerator(word_reply="MUG", clue_reply=json.dumps(CLUES))
    cache = DailyPayloadCache(generator=generator, settings=settings)
    now = datetime(2024, 5, 1)

    asyncio.run(cache.get(now=now))
    cache.clear()
    asyncio.run(cache.get(now=now))

    assert len(generator.calls) == 4


def test_cache_does_not_keep_fallback_payload(settings, upstream_error):
    generator = FakeGenerator(word_reply=upstream_error, clue_reply=upstream_error)
    cache = DailyPayloadCache(generator=generator, settings=settings)

    first = asyncio.run(cache.get(now=datetime(2024, 5, 1, 8)))
    generator.word_reply = "kettle"
    generator.clue_reply = json.dumps(CLUES)
    second = asyncio.run(cache.get(now=datetime(2024, 5, 1, 9)))
    third = asyncio.run(cache.get(now=datetime(2024, 5, 1, 10)))

    assert first.word == "CAMERA"
    assert second.word == "KETTLE"
    assert second.clues == CLUES
    assert third is second
    assert len(generator.calls) == 4


def test_cache_does_not_keep_payload_with_fallback_clues_only(settings, upstream_error):
    generator = FakeGenerator(word_reply="mug", clue_reply=upstream_error)
    cache = DailyPayloadCache(generator=generator, settings=settings)
    now = datetime(2024, 5, 1)

    first = asyncio.run(cache.get(now=now))
    generator.clue_reply = json.dumps(CLUES)
    second = asyncio.run(cache.get(now=now))

    assert first.clues == fallback_clues("MUG")
    assert second.clues == CLUES


@pytest.mark.parametrize(
    "word_reply, clue_reply, degraded",
    [
        ("mug", json.dumps(CLUES), False),
        ("mug", "three\nplain\nlines", False),
        ("two words", json.dumps(CLUES), True),
        ("mug", RuntimeError("socket closed"), True),
    ],
)
def test_build_daily_result_reports_degraded(settings, word_reply, clue_reply, degraded):
    generator = FakeGenerator(word_reply=word_reply, clue_reply=clue_reply)

    result = asyncio.run(build_daily_result(generator=generator, settings=settings))

    assert result.degraded is degraded
    assert len(result.payload.clues) == 5
