from __future__ import annotations

import pytest

from core.config import AppSettings
from core.domain.models import SamplingConfig
from core.interfaces.text_generator import UpstreamError


class FakeGenerator:
    """Scripted `TextGenerator`: one reply (or exception) for the word call, one for the clue call."""

    def __init__(self, word_reply: object = "LAMP", clue_reply: object = None) -> None:
        self.word_reply = word_reply
        self.clue_reply = clue_reply
        self.calls: list[tuple[str, SamplingConfig]] = []

    async def complete(self, instructions: str, config: SamplingConfig) -> str:
        self.calls.append((instructions, config))
        reply = self.clue_reply if config.response_shape == "string_array" else self.word_reply
        if isinstance(reply, BaseException):
            raise reply
        return reply  # type: ignore[return-value]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, ai_api_key="test-key")


@pytest.fixture
def upstream_error() -> UpstreamError:
    return UpstreamError("provider_unreachable: boom")
