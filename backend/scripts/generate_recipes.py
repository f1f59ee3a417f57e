#!/usr/bin/env python3
"""
Recipe Generation Script
========================

Runs the pipeline once and prints (or saves) the resulting batch.

Usage:
    cd backend
    python scripts/generate_recipes.py "two simple pasta dishes"

    # With options:
    python scripts/generate_recipes.py "mezze for 6" --language fr
    python scripts/generate_recipes.py "soups" --output batch.json      # Save full batch
    python scripts/generate_recipes.py "soups" --text-only               # Skip images

Environment:
    OPENAI_API_KEY: Required
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from recipe_ai.core.config import get_settings
from recipe_ai.core.errors import GenerationError, RecipeFetchError
from recipe_ai.pipeline import get_pipeline

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate illustrated recipes")
    parser.add_argument("prompt", help="Free-text cooking request")
    parser.add_argument("--language", choices=["en", "fr", "ar"], default="en")
    parser.add_argument("--output", type=Path, help="Write the batch as JSON to this file")
    parser.add_argument(
        "--text-only",
        action="store_true",
        help="Fetch recipes without generating images",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    pipeline = get_pipeline()

    try:
        if args.text_only:
            recipes = await pipeline.fetcher.fetch(args.prompt, args.language)
        else:
            recipes = await pipeline.fetch_recipes(args.prompt, args.language)
    except (GenerationError, RecipeFetchError) as e:
        logger.error("%s", e)
        return 1

    for i, recipe in enumerate(recipes, start=1):
        image = "image" if getattr(recipe, "has_image", False) else "placeholder"
        print(
            f"{i}. {recipe.recipe_name} "
            f"(serves {recipe.servings}, {len(recipe.ingredients)} ingredients, {image})"
        )

    if args.output:
        payload = [r.model_dump(by_alias=True) for r in recipes]
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("Saved %d recipe(s) to %s", len(recipes), args.output)

    return 0


def main() -> int:
    args = parse_args()
    settings = get_settings()
    if not settings.openai_api_key:
        logger.error("OPENAI_API_KEY not set")
        return 1
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
