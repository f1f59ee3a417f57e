"""
Recipe AI Core
==============

Core configuration, settings and error taxonomy.
"""

from .config import Settings, get_settings
from .errors import (
    GenerationError,
    GenerationFormatError,
    GenerationRequestError,
    ImageError,
    ImageGenerationError,
    ImageMissingError,
    RecipeAIError,
    RecipeFetchError,
)

__all__ = [
    "Settings",
    "get_settings",
    "RecipeAIError",
    "GenerationError",
    "GenerationRequestError",
    "GenerationFormatError",
    "ImageError",
    "ImageGenerationError",
    "ImageMissingError",
    "RecipeFetchError",
]
