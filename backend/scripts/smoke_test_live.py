"""
Smoke Test (live)
=================

Runs the FastAPI app via TestClient against the real OpenAI API and prints
concise outputs. Requires OPENAI_API_KEY; image generation makes this slow.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from fastapi.testclient import TestClient


def describe_image(image_url: str) -> str:
    if not image_url:
        return "placeholder"
    return f"data URI ({len(image_url)} chars)"


def main() -> int:
    # Ensure `recipe_ai` package is importable when running as a script
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

    from recipe_ai.core.config import get_settings

    get_settings.cache_clear()
    settings = get_settings()

    print("=== Smoke Test (live) ===")
    print(f"OPENAI_API_KEY set: {bool(settings.openai_api_key)}")
    print(f"Text model: {settings.text_model} | Image model: {settings.image_model}")

    from main import app

    client = TestClient(app)

    requests = [
        ("two simple pasta dishes", "en"),
        ("un dessert rapide au chocolat", "fr"),
        ("وصفة شوربة عدس", "ar"),
    ]

    for prompt, language in requests:
        r = client.post("/api/recipes", json={"prompt": prompt, "language": language})
        data = r.json()

        print("\n---")
        print("Q:", prompt, f"[{language}]")
        print("HTTP:", r.status_code)
        if r.status_code != 200:
            print("detail:", data.get("detail"))
            continue
        print(
            "recipes:", data.get("recipe_count"),
            "| images:", data.get("images_generated"),
        )
        for i, recipe in enumerate(data.get("recipes", []), start=1):
            print(
                f"  {i}. {recipe['recipeName']} (serves {recipe['servings']}) "
                f"-> {describe_image(recipe['imageUrl'])}"
            )

    s = client.get("/api/status").json()
    print("\n=== /api/status ===")
    print(json.dumps(s, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
