from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    cartesia_api_key: str = ""
    deepgram_api_key: str = ""
    assemblyai_api_key: str = ""  # Optional third provider

    # Provider selection
    stt_provider: str = "cartesia"
    default_language: str = "en"

    # Provider request options
    cartesia_model: str = "ink-whisper"
    cartesia_version: str = "2025-04-16"
    deepgram_model: str = "nova-2"
    request_timeout_s: float = 300.0

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    max_upload_bytes: int = 500 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
