"""
Recipe AI Schemas
=================

Pydantic schemas for structured data.

- Ingredient, BareRecipe: text-model output
- Recipe: BareRecipe plus an image reference
"""

from .recipe import (
    DATA_URI_PREFIX,
    LANGUAGE_NAMES,
    BareRecipe,
    Ingredient,
    Language,
    Recipe,
)

__all__ = [
    "DATA_URI_PREFIX",
    "LANGUAGE_NAMES",
    "BareRecipe",
    "Ingredient",
    "Language",
    "Recipe",
]
