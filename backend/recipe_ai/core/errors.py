"""
Error taxonomy for the recipe pipeline.

Text-generation errors are fatal to a pipeline run and reach callers only as
RecipeFetchError. Image errors are recovered inside the enrichment stage.
"""

from __future__ import annotations


FETCH_FAILED_MESSAGE = (
    "Could not fetch recipes. Please check your API key and network connection."
)


class RecipeAIError(Exception):
    """Base class for every error raised by recipe_ai."""


class GenerationError(RecipeAIError):
    """The text-generation stage failed."""


class GenerationRequestError(GenerationError):
    """The call to the text-generation service failed (network, quota, auth)."""


class GenerationFormatError(GenerationError):
    """The text-generation response is not JSON or lacks the `recipes` array."""


class ImageError(RecipeAIError):
    """A single recipe's image could not be produced."""

    def __init__(self, recipe_name: str, message: str):
        super().__init__(f"{message} (recipe: {recipe_name!r})")
        self.recipe_name = recipe_name


class ImageGenerationError(ImageError):
    """The image-generation call itself failed."""


class ImageMissingError(ImageError):
    """The image call succeeded but returned no inline image data."""


class RecipeFetchError(RecipeAIError):
    """User-facing pipeline failure. The internal cause is chained, not exposed."""

    def __init__(self, message: str = FETCH_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message
