"""
Recipe AI LLM Components
========================

Structured recipe generation and per-recipe image generation.
"""

from .client import build_openai_client
from .image_generator import ImageGenerator, build_image_prompt, to_data_uri
from .recipe_fetcher import RecipeFetcher, parse_recipes_payload
from .recipe_schema import RECIPE_RESPONSE_SCHEMA, build_response_format

__all__ = [
    "build_openai_client",
    "ImageGenerator",
    "build_image_prompt",
    "to_data_uri",
    "RecipeFetcher",
    "parse_recipes_payload",
    "RECIPE_RESPONSE_SCHEMA",
    "build_response_format",
]
