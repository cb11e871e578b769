"""Relay between the EconoGraph client and the Gemini API."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Union

from fastapi import status
from fastapi.responses import JSONResponse

from .config import Settings
from .prompts import ECONOGRAPH_SYSTEM_PROMPT
from .schemas import ErrorEnvelope, GenerateContentRequest, Part, SystemInstruction
from .upstream import post_generate_content

logger = logging.getLogger("econograph-proxy.proxy")

MISSING_API_KEY_MESSAGE = "API key is not set in environment variables."
UPSTREAM_ERROR_MESSAGE = "Failed to fetch from Google API."
INTERNAL_ERROR_MESSAGE = "An internal error occurred in the proxy function."

_MISSING = object()


def build_payload(contents: Any = _MISSING) -> dict:
    """
    Build the generateContent body around the caller's conversation.

    ``contents`` is not inspected. When the caller sent none, the key is left
    out of the body entirely.
    """
    request = GenerateContentRequest(
        system_instruction=SystemInstruction(parts=[Part(text=ECONOGRAPH_SYSTEM_PROMPT)]),
        contents=None if contents is _MISSING else contents,
    )
    payload = request.model_dump(by_alias=True)
    if contents is _MISSING:
        del payload["contents"]
    return payload


def _extract_contents(request_body: Union[bytes, str]) -> Any:
    client_payload = json.loads(request_body)
    if isinstance(client_payload, dict) and "contents" in client_payload:
        return client_payload["contents"]
    return _MISSING


def _error_response(status_code: int, message: str, details: Any = _MISSING) -> JSONResponse:
    if details is _MISSING:
        envelope = ErrorEnvelope(error=message)
    else:
        envelope = ErrorEnvelope(error=message, details=details)
    return JSONResponse(status_code=status_code, content=envelope.to_content())


async def handle(request_body: Union[bytes, str], settings: Settings) -> JSONResponse:
    api_key: Optional[str] = settings.api_key_value()
    if not api_key:
        logger.error("Gemini API key is not configured")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MISSING_API_KEY_MESSAGE)

    try:
        payload = build_payload(_extract_contents(request_body))
        logger.info("proxying generateContent request", extra={"model": settings.gemini_model})

        response = await post_generate_content(api_key=api_key, payload=payload, settings=settings)

        if not response.is_success:
            error_body = response.json()
            logger.error(f"Google API Error: {response.status_code} - {error_body}")
            return _error_response(response.status_code, UPSTREAM_ERROR_MESSAGE, details=error_body)

        # Rendered here so NaN/Infinity from upstream fail inside the try
        return JSONResponse(status_code=status.HTTP_200_OK, content=response.json())
    except Exception as exc:
        # Class and message only; a traceback could carry the keyed URL
        logger.error(f"Proxy function error: {type(exc).__name__}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
