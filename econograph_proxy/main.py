from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .proxy import handle

logger = logging.getLogger("econograph-proxy")
logging.basicConfig(level=logging.INFO)
# httpx logs each request URL at INFO, and the upstream URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)

settings = get_settings()
app = FastAPI(title=settings.app_name)


@app.middleware("http")
async def add_app_header(request: Request, call_next):  # type: ignore[override]
    response = await call_next(request)
    response.headers["X-App"] = settings.app_name
    return response


@app.get("/healthz")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/api/gemini-proxy")
async def gemini_proxy(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Forward a chat history to Gemini with the EconoGraph system instruction attached."""
    body = await request.body()
    return await handle(body, settings)


def create_app() -> FastAPI:
    return app
