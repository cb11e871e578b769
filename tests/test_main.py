"""Route-level tests for the FastAPI application."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient
from respx import MockRouter

from econograph_proxy import create_app
from econograph_proxy.config import Settings, get_settings
from econograph_proxy.proxy import MISSING_API_KEY_MESSAGE, UPSTREAM_ERROR_MESSAGE

PROXY_PATH = "/api/gemini-proxy"


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-App"] == "econograph-proxy"


def test_proxy_route_relays_success(
    client: TestClient,
    upstream_url: str,
    respx_mock: MockRouter,
    contents: List[Dict[str, Any]],
    gemini_success_body: Dict[str, Any],
) -> None:
    route = respx_mock.post(url__startswith=upstream_url).mock(
        return_value=httpx.Response(200, json=gemini_success_body)
    )

    response = client.post(PROXY_PATH, json={"contents": contents})

    assert response.status_code == 200
    assert response.json() == gemini_success_body
    assert response.headers["X-App"] == "econograph-proxy"
    assert route.called


def test_proxy_route_relays_upstream_status(
    client: TestClient, upstream_url: str, respx_mock: MockRouter, contents: List[Dict[str, Any]]
) -> None:
    respx_mock.post(url__startswith=upstream_url).mock(
        return_value=httpx.Response(429, json={"error": "rate limited"})
    )

    response = client.post(PROXY_PATH, json={"contents": contents})

    assert response.status_code == 429
    assert response.json() == {"error": UPSTREAM_ERROR_MESSAGE, "details": {"error": "rate limited"}}


def test_proxy_route_without_key(settings_without_key: Settings, contents: List[Dict[str, Any]]) -> None:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings_without_key
    try:
        with TestClient(app) as test_client:
            response = test_client.post(PROXY_PATH, json={"contents": contents})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": MISSING_API_KEY_MESSAGE}


def test_proxy_route_rejects_get(client: TestClient) -> None:
    response = client.get(PROXY_PATH)

    assert response.status_code == 405
