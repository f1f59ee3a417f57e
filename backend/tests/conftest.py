"""
Shared fixtures for the recipe pipeline tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from recipe_ai.core.config import Settings
from recipe_ai.core.trace_logger import TraceLogger, set_trace_logger
from recipe_ai.pipeline import RecipePipeline

from .fakes import FakeOpenAI


@pytest.fixture
def fake_client() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        openai_api_key="test-key",
        text_model="test-text-model",
        image_model="test-image-model",
        trace_log_path=tmp_path / "recipe_traces.jsonl",
    )


@pytest.fixture
def pipeline(fake_client: FakeOpenAI, settings: Settings) -> RecipePipeline:
    return RecipePipeline(fake_client, settings=settings)


@pytest.fixture(autouse=True)
def trace_log_path(tmp_path: Path):
    """Keep trace files out of the repository during tests."""
    path = tmp_path / "traces" / "recipe_traces.jsonl"
    set_trace_logger(TraceLogger(log_path=path, enabled=True))
    yield path
    set_trace_logger(None)
