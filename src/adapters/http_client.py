"""httpx wrapper.

- Standardizes timeouts and headers for the few direct HTTP calls (diagnostics).
- Easy to replace with a stub/mocked client in tests.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

USER_AGENT = "daily-object/0.1"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured AI timeout."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.ai_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def probe_url(url: str, settings: AppSettings | None = None) -> tuple[bool, str]:
    """GET `url` once; any HTTP answer counts as reachable."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, f"HTTP {response.status_code}"
