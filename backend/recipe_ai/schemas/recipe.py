"""
Recipe Schemas
==============

Data contracts shared by the fetch and image stages.

Python attributes are snake_case; the camelCase aliases are the names used by
the text model's JSON output and by the API consumer.
"""

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


Language = Literal["en", "fr", "ar"]

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "fr": "French",
    "ar": "Arabic",
}

DATA_URI_PREFIX = "data:image/png;base64,"


class Ingredient(BaseModel):
    """A single ingredient line."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: float = Field(ge=0)
    unit: str = Field(description="e.g., grams, ml, tsp, cup")


class BareRecipe(BaseModel):
    """Recipe as returned by the text model, before an image is attached."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    recipe_name: str = Field(alias="recipeName", min_length=1)
    description: str
    servings: int = Field(ge=1, description="Default number of people served")
    ingredients: List[Ingredient]
    standard_instructions: List[str] = Field(alias="standardInstructions", min_length=1)
    thermomix_instructions: List[str] = Field(alias="thermomixInstructions", min_length=1)

    @field_validator("recipe_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("recipeName must not be blank")
        return v


class Recipe(BareRecipe):
    """
    Enriched recipe.

    image_url is a base64 PNG data URI, or "" when no image is available and
    the caller should show its placeholder.
    """

    image_url: str = Field(default="", alias="imageUrl")

    @classmethod
    def from_bare(cls, bare: BareRecipe, image_url: str = "") -> "Recipe":
        return cls(**bare.model_dump(), image_url=image_url)

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)
