from __future__ import annotations

from typing import Any, Dict, List

import pytest

from econograph_proxy.config import Settings
from econograph_proxy.upstream import build_upstream_url

TEST_API_KEY = "test-gemini-key"


@pytest.fixture
def settings() -> Settings:
    """Settings with a credential and no .env lookup."""
    return Settings(_env_file=None, gemini_api_key=TEST_API_KEY)


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(_env_file=None, gemini_api_key=None)


@pytest.fixture
def upstream_url(settings: Settings) -> str:
    return build_upstream_url(settings)


@pytest.fixture
def contents() -> List[Dict[str, Any]]:
    """A two-turn conversation: source text, then a revision request."""
    return [
        {"role": "user", "parts": [{"text": "Author: A. Researcher\n\nInflation expectations in small open economies..."}]},
        {"role": "model", "parts": [{"text": "{\"metadata\": {\"title\": \"Draft\"}}"}]},
        {"role": "user", "parts": [{"text": "Make the executive summary shorter."}]},
    ]


@pytest.fixture
def gemini_success_body() -> Dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [{"text": "{\"metadata\": {\"title\": \"Inflation Expectations\"}}"}],
                },
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {"promptTokenCount": 812, "candidatesTokenCount": 240, "totalTokenCount": 1052},
    }
