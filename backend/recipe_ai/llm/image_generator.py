"""
Image Enrichment Stage
======================

One image request per recipe, all launched at once.

Failures are per recipe: a failed or empty image call turns into an empty
`image_url` for that recipe only. The batch keeps its length and order, and
results are joined by position, not by arrival.
"""

import asyncio
import logging
from typing import Any, List, Optional, Sequence

from openai import AsyncOpenAI

from ..core.config import Settings, get_settings
from ..core.errors import ImageGenerationError, ImageMissingError
from ..schemas.recipe import DATA_URI_PREFIX, BareRecipe, Recipe

logger = logging.getLogger(__name__)


IMAGE_PROMPT_TEMPLATE = (
    "A professional, vibrant, high-quality photograph of {name}. {description}. "
    "Food photography, delicious, appetizing, centered, well-lit."
)


def build_image_prompt(recipe: BareRecipe) -> str:
    description = recipe.description.strip().rstrip(".")
    return IMAGE_PROMPT_TEMPLATE.format(name=recipe.recipe_name, description=description)


def to_data_uri(payload: str) -> str:
    """Wrap a base64 payload into a PNG data URI; empty stays empty."""
    return f"{DATA_URI_PREFIX}{payload}" if payload else ""


class ImageGenerator:
    """
    Generates and attaches recipe images.

    Usage:
        generator = ImageGenerator(client)
        recipes = await generator.enrich_with_images(bare_recipes)
    """

    def __init__(self, client: AsyncOpenAI, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.client = client
        self.model = settings.image_model
        self.size = settings.image_size
        self.timeout = settings.image_timeout_seconds

    async def generate_image(self, recipe: BareRecipe) -> str:
        """
        Generate one image for a recipe.

        Returns:
            The base64 payload of the first image in the response

        Raises:
            ImageGenerationError: the request failed or timed out
            ImageMissingError: the response carried no image data
        """
        try:
            request = self._request_image(build_image_prompt(recipe))
            if self.timeout is not None:
                response = await asyncio.wait_for(request, timeout=self.timeout)
            else:
                response = await request
        except asyncio.TimeoutError as e:
            raise ImageGenerationError(
                recipe.recipe_name, f"Image request timed out after {self.timeout}s"
            ) from e
        except Exception as e:
            raise ImageGenerationError(recipe.recipe_name, f"Image request failed: {e}") from e

        for item in getattr(response, "data", None) or []:
            payload = getattr(item, "b64_json", None)
            if payload:
                return payload

        raise ImageMissingError(recipe.recipe_name, "No image data found in response")

    async def enrich_with_images(self, recipes: Sequence[BareRecipe]) -> List[Recipe]:
        """
        Attach an image to every recipe.

        Never raises for image failures. Output has the same length and order
        as the input.
        """
        if not recipes:
            return []

        payloads = await asyncio.gather(*(self._image_or_empty(r) for r in recipes))

        enriched = [
            Recipe.from_bare(recipe, image_url=to_data_uri(payload))
            for recipe, payload in zip(recipes, payloads)
        ]

        logger.info(
            "Images attached: %d/%d (model=%s)",
            sum(1 for r in enriched if r.has_image),
            len(enriched),
            self.model,
        )
        return enriched

    async def _image_or_empty(self, recipe: BareRecipe) -> str:
        try:
            return await self.generate_image(recipe)
        except Exception as e:
            logger.warning("Failed to generate image for %r: %s", recipe.recipe_name, e)
            return ""

    def _request_image(self, prompt: str) -> Any:
        kwargs = {
            "model": self.model,
            "prompt": prompt,
            "size": self.size,
            "n": 1,
        }
        # dall-e models return URLs unless asked for inline base64
        if self.model.startswith("dall-e"):
            kwargs["response_format"] = "b64_json"
        return self.client.images.generate(**kwargs)
