from __future__ import annotations

import logging
import os
from typing import Optional

from google.cloud import secretmanager

logger = logging.getLogger("econograph-proxy.secrets")


def _resolve_project_id(project_id: Optional[str]) -> str:
    resolved = project_id or os.environ.get("GCP_PROJECT") or os.environ.get("GOOGLE_CLOUD_PROJECT")
    if not resolved:
        raise ValueError(
            "No GCP project for the Gemini API key secret. Set ECONOGRAPH_PROXY_GCP_PROJECT_ID, "
            "GCP_PROJECT or GOOGLE_CLOUD_PROJECT."
        )
    return resolved


def fetch_gemini_api_key(secret_name: str, project_id: Optional[str] = None) -> str:
    """
    Read the latest version of the Gemini API key secret.

    The value is returned without surrounding whitespace; keys pasted into the
    console usually end with a newline. The key itself is never logged.
    """
    name = f"projects/{_resolve_project_id(project_id)}/secrets/{secret_name}/versions/latest"

    logger.info(f"Fetching Gemini API key from Secret Manager: {secret_name}")
    client = secretmanager.SecretManagerServiceClient()
    response = client.access_secret_version(request={"name": name})

    api_key = response.payload.data.decode("UTF-8").strip()
    if not api_key:
        logger.warning(f"Secret {secret_name} is empty")
    return api_key


def should_use_secret_manager() -> bool:
    """True if USE_SECRET_MANAGER is set to "true", "1" or "yes" (case-insensitive)."""
    return os.environ.get("USE_SECRET_MANAGER", "").lower() in ("true", "1", "yes")
