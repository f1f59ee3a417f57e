"""
API tests hitting the FastAPI /api/recipes endpoint with a fake OpenAI client.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from recipe_ai.core.errors import FETCH_FAILED_MESSAGE
from recipe_ai.pipeline import get_pipeline

from .fakes import recipes_json


@pytest.fixture
def api_client(pipeline):
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def test_recipes_are_returned_in_camel_case(api_client, fake_client):
    fake_client.chat.completions.content = recipes_json("Soup", "Salad")
    fake_client.images.outcomes["Salad"] = RuntimeError("no image today")

    r = api_client.post("/api/recipes", json={"prompt": "light lunch", "language": "en"})

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["recipe_count"] == 2
    assert data["images_generated"] == 1

    soup, salad = data["recipes"]
    assert soup["recipeName"] == "Soup"
    assert soup["imageUrl"].startswith("data:image/png;base64,")
    assert salad["imageUrl"] == ""
    for key in ("description", "servings", "ingredients", "standardInstructions", "thermomixInstructions"):
        assert key in soup


def test_language_defaults_to_english(api_client, fake_client):
    api_client.post("/api/recipes", json={"prompt": "soup"})

    system = fake_client.chat.completions.calls[0]["messages"][0]["content"]
    assert "English" in system


def test_pipeline_failure_is_a_single_generic_error(api_client, fake_client):
    fake_client.chat.completions.error = PermissionError("invalid api key")

    r = api_client.post("/api/recipes", json={"prompt": "soup", "language": "ar"})

    assert r.status_code == 502
    assert r.json()["detail"] == FETCH_FAILED_MESSAGE
    assert "invalid api key" not in r.text


@pytest.mark.parametrize(
    "payload",
    [
        {"prompt": ""},
        {"prompt": "soup", "language": "de"},
        {"language": "en"},
    ],
)
def test_invalid_requests_are_rejected(api_client, fake_client, payload):
    r = api_client.post("/api/recipes", json=payload)

    assert r.status_code == 422
    assert fake_client.chat.completions.calls == []


def test_health(api_client):
    r = api_client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["version"].startswith("1.0")


def test_status_does_not_leak_the_key(api_client):
    r = api_client.get("/api/status")
    assert r.status_code == 200
    data = r.json()
    assert set(data["models"]) == {"text", "image"}
    assert isinstance(data["openai_api_key_set"], bool)
