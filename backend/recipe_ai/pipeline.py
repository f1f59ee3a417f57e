"""
Recipe AI Pipeline
==================

The core application logic for Recipe AI:
  1) RecipeFetcher (LLM): prompt -> bare recipes under a strict JSON schema
  2) ImageGenerator (LLM): one image per recipe, concurrently, failures -> ""

Text-stage failures abort the run as a single RecipeFetchError. Image
failures never do.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from openai import AsyncOpenAI

from .core.config import Settings, get_settings
from .core.errors import GenerationError, RecipeFetchError
from .llm.client import build_openai_client
from .llm.image_generator import ImageGenerator
from .llm.recipe_fetcher import RecipeFetcher
from .schemas.recipe import Language, Recipe

logger = logging.getLogger(__name__)


class RecipePipeline:
    def __init__(self, client: AsyncOpenAI, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.client = client

        self.fetcher = RecipeFetcher(client, settings=self.settings)
        self.image_generator = ImageGenerator(client, settings=self.settings)

        logger.info(
            "RecipePipeline initialized (text_model=%s, image_model=%s)",
            self.settings.text_model,
            self.settings.image_model,
        )

    async def fetch_recipes(self, prompt: str, language: Language) -> List[Recipe]:
        # 1) Structured recipes
        try:
            bare_recipes = await self.fetcher.fetch(prompt, language)
        except GenerationError as e:
            logger.error("Error fetching recipes (%s): %s", type(e).__name__, e)
            raise RecipeFetchError() from e

        if not bare_recipes:
            return []

        # 2) Images, one per recipe
        return await self.image_generator.enrich_with_images(bare_recipes)


@lru_cache(maxsize=1)
def get_pipeline() -> RecipePipeline:
    """Singleton pipeline built from settings."""
    settings = get_settings()
    return RecipePipeline(build_openai_client(settings), settings=settings)


async def fetch_recipes(prompt: str, language: Language = "en") -> List[Recipe]:
    """Convenience function running the default pipeline."""
    return await get_pipeline().fetch_recipes(prompt, language)
