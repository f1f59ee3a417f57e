"""
Recipe AI Configuration
=======================

Centralized application settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "Recipe AI"
    app_version: str = "1.0.0"

    # OpenAI
    openai_api_key: str = ""
    openai_base_url: Optional[str] = None
    openai_max_retries: int = 0

    # Text generation (structured recipes)
    text_model: str = "gpt-4o-mini"
    text_temperature: float = 0.7

    # Image generation
    image_model: str = "gpt-image-1"
    image_size: str = "1024x1024"
    image_timeout_seconds: Optional[float] = None  # None = wait for the network call

    # Trace logging
    enable_trace_logging: bool = True
    trace_log_path: Path = Path(__file__).parent.parent.parent / "logs" / "recipe_traces.jsonl"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api"
    debug: bool = False

    # CORS - the UI is served from a different origin
    cors_origins: list = ["*"]
    cors_allow_credentials: bool = False  # Must be False with wildcard origins
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
