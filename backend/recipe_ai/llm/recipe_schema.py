"""
JSON schema sent with every text-generation request.

Kept as plain data so the client binding serializes it as-is. Strict
structured output requires every property to be listed in `required` and
`additionalProperties` to be false at every object level.
"""

from __future__ import annotations

from typing import Any, Dict


INGREDIENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "quantity": {"type": "number", "minimum": 0},
        "unit": {"type": "string", "description": "e.g., grams, ml, tsp, cup"},
    },
    "required": ["name", "quantity", "unit"],
    "additionalProperties": False,
}

RECIPE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "recipeName": {"type": "string", "description": "The name of the recipe."},
        "description": {
            "type": "string",
            "description": "A short, appealing description of the dish.",
        },
        "servings": {
            "type": "integer",
            "minimum": 1,
            "description": "The default number of people this recipe serves.",
        },
        "ingredients": {"type": "array", "items": INGREDIENT_SCHEMA},
        "standardInstructions": {
            "type": "array",
            "description": "Step-by-step cooking instructions for a standard kitchen.",
            "minItems": 1,
            "items": {"type": "string"},
        },
        "thermomixInstructions": {
            "type": "array",
            "description": "Step-by-step cooking instructions specifically for a Thermomix machine.",
            "minItems": 1,
            "items": {"type": "string"},
        },
    },
    "required": [
        "recipeName",
        "description",
        "servings",
        "ingredients",
        "standardInstructions",
        "thermomixInstructions",
    ],
    "additionalProperties": False,
}

RECIPE_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "recipes": {"type": "array", "items": RECIPE_SCHEMA},
    },
    "required": ["recipes"],
    "additionalProperties": False,
}


def build_response_format(name: str = "recipe_batch") -> Dict[str, Any]:
    """Wrap the schema in the `response_format` payload of a chat completion."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": name,
            "strict": True,
            "schema": RECIPE_RESPONSE_SCHEMA,
        },
    }
