"""
OpenAI client construction.

The client is built once from settings and handed to the pipeline, so tests
can pass a fake object with the same `chat.completions` / `images` surface.
"""

from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI

from ..core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_openai_client(settings: Optional[Settings] = None) -> AsyncOpenAI:
    """Create the async OpenAI client used by both generation stages."""
    settings = settings or get_settings()

    if not settings.openai_api_key:
        # Requests will fail with an auth error and surface as a fetch failure.
        logger.warning("OPENAI_API_KEY is not configured; recipe generation will fail")

    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=settings.openai_max_retries,
    )
