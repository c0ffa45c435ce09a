"""Text generator adapter (OpenAI-compatible providers via the OpenAI SDK).

Responsibility:
- Translate one instruction + `SamplingConfig` into a chat completion request.
- Return the raw text content.
- Raise every provider failure as `UpstreamError`.
"""

from __future__ import annotations

from typing import Any

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    OpenAIError,
    RateLimitError,
)

from core.config import AppSettings
from core.domain.models import SamplingConfig
from core.interfaces.text_generator import UpstreamError

_CLUES_SCHEMA: dict[str, Any] = {
    "name": "clues",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "clues": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["clues"],
        "additionalProperties": False,
    },
}


def build_openai_client(settings: AppSettings) -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=(settings.ai_api_key or "").strip(),
        base_url=settings.ai_base_url,
        timeout=settings.ai_timeout_seconds,
        max_retries=settings.ai_max_retries,
    )


def _is_local_base_url(url: str) -> bool:
    url_l = (url or "").strip().lower()
    return url_l.startswith("http://localhost") or url_l.startswith("http://127.0.0.1") or url_l.startswith(
        "http://0.0.0.0"
    )


class OpenAITextGenerator:
    """`TextGenerator` backed by `AsyncOpenAI.chat.completions`."""

    def __init__(self, settings: AppSettings | None = None, *, client: AsyncOpenAI | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def model(self) -> str:
        return self._settings.ai_model

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            api_key = (self._settings.ai_api_key or "").strip()
            if not api_key:
                # Local OpenAI-compatible servers (ollama, llama.cpp) accept any key.
                if not _is_local_base_url(self._settings.ai_base_url):
                    raise UpstreamError("missing_ai_api_key")
                self._settings = self._settings.model_copy(update={"ai_api_key": "local"})
            self._client = build_openai_client(self._settings)
        return self._client

    def _request_kwargs(self, instructions: str, config: SamplingConfig) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self._settings.ai_model,
            "messages": [{"role": "system", "content": instructions}],
            "temperature": config.temperature,
        }
        if config.max_tokens is not None:
            kwargs["max_tokens"] = config.max_tokens
        if config.response_shape == "string_array" and self._settings.ai_structured_output:
            kwargs["response_format"] = {"type": "json_schema", "json_schema": _CLUES_SCHEMA}
        return kwargs

    async def complete(self, instructions: str, config: SamplingConfig) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(**self._request_kwargs(instructions, config))
        except RateLimitError as exc:
            raise UpstreamError(f"rate_limited: {exc}") from exc
        except APIStatusError as exc:
            raise UpstreamError(f"provider_status_{exc.status_code}: {exc}") from exc
        except (APITimeoutError, APIConnectionError) as exc:
            raise UpstreamError(f"provider_unreachable: {exc}") from exc
        except OpenAIError as exc:
            raise UpstreamError(f"provider_failed: {exc}") from exc

        if not response.choices:
            raise UpstreamError("empty_response")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise UpstreamError("empty_response")
        return content
