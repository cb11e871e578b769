from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr, validator
from pydantic_settings import BaseSettings

from .secrets import fetch_gemini_api_key, should_use_secret_manager

logger = logging.getLogger("econograph-proxy.config")


class Settings(BaseSettings):
    app_name: str = "econograph-proxy"
    gemini_model: str = "gemini-1.5-pro-latest"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
    request_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Upstream request timeout. None leaves the call unbounded.",
    )

    # Secret Manager configuration
    gcp_project_id: Optional[str] = None
    secret_api_key_name: str = "gemini-api-key"

    # Declared after the Secret Manager fields so the validator can read them
    gemini_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "ECONOGRAPH_PROXY_GEMINI_API_KEY", "gemini_api_key"),
    )

    class Config:
        env_prefix = "ECONOGRAPH_PROXY_"
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    @validator("gemini_api_key", pre=True, always=True)
    def _load_api_key(cls, value: object, values: dict) -> object:
        if isinstance(value, str):
            value = value.strip()
        if should_use_secret_manager() and not value:
            logger.info("Loading gemini_api_key from Secret Manager")
            try:
                value = fetch_gemini_api_key(
                    values.get("secret_api_key_name", "gemini-api-key"),
                    values.get("gcp_project_id"),
                )
            except Exception as e:
                logger.error(f"Failed to load gemini_api_key from Secret Manager: {e}")
                raise
        return value or None

    def api_key_value(self) -> Optional[str]:
        if self.gemini_api_key is None:
            return None
        return self.gemini_api_key.get_secret_value() or None


@lru_cache()
def get_settings() -> Settings:
    return Settings()
