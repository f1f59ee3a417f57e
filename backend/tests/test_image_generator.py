"""
Tests for the image enrichment stage: per-recipe failures, ordering, fan-out.
"""

from __future__ import annotations

import pytest

from recipe_ai.core.config import Settings
from recipe_ai.core.errors import ImageGenerationError, ImageMissingError
from recipe_ai.llm.image_generator import ImageGenerator, build_image_prompt, to_data_uri
from recipe_ai.schemas.recipe import BareRecipe

from .fakes import MISSING, fake_payload, make_recipe


def bare(*names: str) -> list[BareRecipe]:
    return [BareRecipe.model_validate(make_recipe(n)) for n in names]


@pytest.fixture
def generator(fake_client, settings) -> ImageGenerator:
    return ImageGenerator(fake_client, settings=settings)


def test_image_prompt_uses_name_and_description():
    prompt = build_image_prompt(bare("Lentil soup")[0])

    assert "Lentil soup" in prompt
    assert "A simple lentil soup" in prompt
    for word in ("appetizing", "centered", "well-lit"):
        assert word in prompt


def test_to_data_uri():
    assert to_data_uri("abc=") == "data:image/png;base64,abc="
    assert to_data_uri("") == ""


@pytest.mark.asyncio
async def test_generate_image_returns_first_inline_payload(generator, fake_client):
    payload = await generator.generate_image(bare("Soup")[0])

    assert payload == fake_payload("Soup")
    call = fake_client.images.calls[0]
    assert call["model"] == "test-image-model"
    assert call["n"] == 1
    assert "response_format" not in call


@pytest.mark.asyncio
async def test_dall_e_models_ask_for_inline_base64(fake_client, settings):
    generator = ImageGenerator(fake_client, settings=settings.model_copy(update={"image_model": "dall-e-3"}))

    await generator.generate_image(bare("Soup")[0])

    assert fake_client.images.calls[0]["response_format"] == "b64_json"


@pytest.mark.asyncio
async def test_response_without_image_data_is_missing_error(generator, fake_client):
    fake_client.images.outcomes["Soup"] = MISSING

    with pytest.raises(ImageMissingError) as excinfo:
        await generator.generate_image(bare("Soup")[0])

    assert excinfo.value.recipe_name == "Soup"


@pytest.mark.asyncio
async def test_request_failure_is_generation_error(generator, fake_client):
    fake_client.images.outcomes["Soup"] = RuntimeError("quota exceeded")

    with pytest.raises(ImageGenerationError) as excinfo:
        await generator.generate_image(bare("Soup")[0])

    assert isinstance(excinfo.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_timeout_is_generation_error(fake_client, tmp_path):
    settings = Settings(openai_api_key="k", image_timeout_seconds=0.01, trace_log_path=tmp_path / "t.jsonl")
    generator = ImageGenerator(fake_client, settings=settings)
    fake_client.images.delays["Soup"] = 0.5

    with pytest.raises(ImageGenerationError):
        await generator.generate_image(bare("Soup")[0])


@pytest.mark.asyncio
async def test_successful_images_become_data_uris(generator):
    recipes = await generator.enrich_with_images(bare("Soup", "Salad"))

    assert [r.image_url for r in recipes] == [
        "data:image/png;base64," + fake_payload("Soup"),
        "data:image/png;base64," + fake_payload("Salad"),
    ]
    assert all(r.has_image for r in recipes)


@pytest.mark.asyncio
async def test_failures_only_blank_their_own_recipe(generator, fake_client):
    fake_client.images.outcomes["Salad"] = RuntimeError("model error")
    fake_client.images.outcomes["Stew"] = MISSING

    recipes = await generator.enrich_with_images(bare("Soup", "Salad", "Stew", "Tart"))

    assert [r.recipe_name for r in recipes] == ["Soup", "Salad", "Stew", "Tart"]
    assert recipes[0].image_url == "data:image/png;base64," + fake_payload("Soup")
    assert recipes[1].image_url == ""
    assert recipes[2].image_url == ""
    assert recipes[3].image_url == "data:image/png;base64," + fake_payload("Tart")
    assert len(fake_client.images.calls) == 4


@pytest.mark.asyncio
async def test_all_failures_still_return_full_batch(generator, fake_client):
    for name in ("Soup", "Salad"):
        fake_client.images.outcomes[name] = RuntimeError("down")

    recipes = await generator.enrich_with_images(bare("Soup", "Salad"))

    assert len(recipes) == 2
    assert [r.image_url for r in recipes] == ["", ""]


@pytest.mark.asyncio
async def test_order_is_positional_not_arrival(generator, fake_client):
    fake_client.images.delays["Alpha"] = 0.1

    recipes = await generator.enrich_with_images(bare("Alpha", "Beta", "Gamma"))

    assert fake_client.images.completed[-1] == "Alpha"
    assert [r.recipe_name for r in recipes] == ["Alpha", "Beta", "Gamma"]
    assert recipes[0].image_url == "data:image/png;base64," + fake_payload("Alpha")


@pytest.mark.asyncio
async def test_requests_run_concurrently(generator, fake_client):
    names = ("Alpha", "Beta", "Gamma", "Delta")
    for name in names:
        fake_client.images.delays[name] = 0.05

    await generator.enrich_with_images(bare(*names))

    assert fake_client.images.max_in_flight == len(names)


@pytest.mark.asyncio
async def test_empty_input_makes_no_calls(generator, fake_client):
    assert await generator.enrich_with_images([]) == []
    assert fake_client.images.calls == []


@pytest.mark.asyncio
async def test_bare_fields_are_carried_over(generator):
    source = bare("Soup")[0]

    (recipe,) = await generator.enrich_with_images([source])

    assert recipe.model_dump(exclude={"image_url"}) == source.model_dump()
