"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

UNCONFIGURED_ENDPOINT = "unconfigured"
_PLACEHOLDER_ENDPOINTS = {
    UNCONFIGURED_ENDPOINT,
    "YOUR_FOOD_RECOGNITION_API_ENDPOINT",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    recognition_endpoint: str = UNCONFIGURED_ENDPOINT
    recognition_api_key: str = ""
    recognition_timeout_seconds: float = 10.0
    default_portion_grams: float = 100.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def is_endpoint_configured(endpoint: str | None) -> bool:
    """Return whether an endpoint value points at a real recognition service."""
    if endpoint is None:
        return False
    cleaned = endpoint.strip()
    if not cleaned:
        return False
    return cleaned not in _PLACEHOLDER_ENDPOINTS
