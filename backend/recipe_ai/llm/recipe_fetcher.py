"""
Structured Recipe Fetcher
=========================

Single text-generation call that returns bare recipes (no images yet).

The JSON schema is always sent with the request; the prompt alone is never
trusted for structure. Anything that does not parse into `{"recipes": [...]}`
is a hard failure of the whole request.
"""

import json
import logging
from typing import Any, List, Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from ..core.config import Settings, get_settings
from ..core.errors import GenerationFormatError, GenerationRequestError
from ..schemas.recipe import LANGUAGE_NAMES, BareRecipe, Language
from .recipe_schema import build_response_format

logger = logging.getLogger(__name__)


SYSTEM_INSTRUCTION_TEMPLATE = (
    "You are an expert recipe assistant. Generate recipes in {language}. "
    "Ensure the output strictly follows the provided JSON schema. "
    "Do not include markdown formatting like ```json in your response."
)


def build_system_instruction(language: Language) -> str:
    return SYSTEM_INSTRUCTION_TEMPLATE.format(language=LANGUAGE_NAMES.get(language, language))


def parse_recipes_payload(text: Optional[str]) -> List[BareRecipe]:
    """
    Parse the model's text output into bare recipes.

    Args:
        text: Raw `message.content` of the completion (may be None)

    Returns:
        Recipes in the order the model returned them

    Raises:
        GenerationFormatError: not JSON, wrong top-level shape, or a recipe
            that does not match the data contract
    """
    if text is None or not text.strip():
        raise GenerationFormatError("Empty response from text-generation service")

    try:
        data = json.loads(text.strip())
    except (ValueError, RecursionError) as e:
        raise GenerationFormatError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("recipes"), list):
        logger.error("Parsed data is not in the expected format: %.200r", data)
        raise GenerationFormatError("Response does not contain a `recipes` array")

    recipes: List[BareRecipe] = []
    for index, item in enumerate(data["recipes"]):
        try:
            recipes.append(BareRecipe.model_validate(item))
        except ValidationError as e:
            raise GenerationFormatError(f"Recipe #{index} does not match the schema: {e}") from e

    return recipes


class RecipeFetcher:
    """
    Requests structured recipes from the text model.

    Usage:
        fetcher = RecipeFetcher(client)
        bare_recipes = await fetcher.fetch("quick vegetarian dinners for 4", "en")
    """

    def __init__(self, client: AsyncOpenAI, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.client = client
        self.model = settings.text_model
        self.temperature = settings.text_temperature

    async def fetch(self, prompt: str, language: Language) -> List[BareRecipe]:
        """
        Fetch bare recipes for a free-text request.

        Args:
            prompt: User request (e.g. "two simple pasta dishes")
            language: Target language code

        Returns:
            List of BareRecipe, possibly empty
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": build_system_instruction(language)},
                    {"role": "user", "content": prompt},
                ],
                response_format=build_response_format(),
                temperature=self.temperature,
            )
        except Exception as e:
            raise GenerationRequestError(f"Text-generation request failed: {e}") from e

        recipes = parse_recipes_payload(self._extract_text(response))

        logger.info(
            "Fetched %d recipe(s): model=%s, language=%s",
            len(recipes),
            self.model,
            language,
        )
        return recipes

    @staticmethod
    def _extract_text(response: Any) -> Optional[str]:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise GenerationFormatError("Response contains no choices")

        message = getattr(choices[0], "message", None)
        if message is None:
            raise GenerationFormatError("Response choice has no message")

        refusal = getattr(message, "refusal", None)
        if refusal:
            raise GenerationFormatError(f"Model refused the request: {refusal}")

        return getattr(message, "content", None)
