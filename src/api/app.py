"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from adapters.openai_generator import OpenAITextGenerator
from api.routes import router
from core.config import AppSettings
from core.interfaces.text_generator import TextGenerator
from core.services.daily_pipeline import DailyPayloadCache


def create_app(
    settings: AppSettings | None = None,
    generator: TextGenerator | None = None,
) -> FastAPI:
    """Build the app; `generator` defaults to the OpenAI adapter built from `settings`."""

    settings = settings or AppSettings()
    generator = generator or OpenAITextGenerator(settings)

    app = FastAPI(
        title="Daily Object",
        version="0.1.0",
        description="One secret everyday object and five progressive clues per request.",
    )
    app.state.settings = settings
    app.state.generator = generator
    app.state.payload_cache = (
        DailyPayloadCache(generator=generator, settings=settings) if settings.cache_per_day else None
    )
    app.include_router(router)
    return app
