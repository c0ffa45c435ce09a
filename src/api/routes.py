"""HTTP routes.

- `GET /api/daily`: today's date tag, five clues and the secret word.
- `GET /healthz`: liveness only, no upstream call.

The daily route never answers with an error status: every generation failure
is absorbed by the pipeline and served as fallback content.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core.config import AppSettings
from core.domain.models import DailyPayload
from core.interfaces.text_generator import TextGenerator
from core.services.daily_pipeline import DailyPayloadCache, build_daily_payload

router = APIRouter()


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_text_generator(request: Request) -> TextGenerator:
    return request.app.state.generator


def get_payload_cache(request: Request) -> DailyPayloadCache | None:
    return request.app.state.payload_cache


@router.get("/api/daily", response_model=DailyPayload)
async def get_daily(
    generator: TextGenerator = Depends(get_text_generator),
    settings: AppSettings = Depends(get_settings),
    cache: DailyPayloadCache | None = Depends(get_payload_cache),
) -> DailyPayload:
    if cache is not None:
        return await cache.get()
    return await build_daily_payload(generator=generator, settings=settings)


@router.get("/healthz")
async def healthz() -> dict[str, bool]:
    return {"ok": True}
