from __future__ import annotations

import httpx

from .config import Settings


def build_upstream_url(settings: Settings) -> str:
    return settings.gemini_base_url.format(model=settings.gemini_model)


async def post_generate_content(api_key: str, payload: dict, settings: Settings) -> httpx.Response:
    """Single POST to Gemini generateContent. The key travels as the ``key`` query parameter."""
    url = build_upstream_url(settings)
    async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as client:
        return await client.post(url, params={"key": api_key}, json=payload)
