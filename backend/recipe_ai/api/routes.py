"""
Recipe AI API Routes
====================

HTTP surface consumed by the UI layer.

Endpoints:
  - POST /recipes
  - GET  /health
  - GET  /status
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from ..core.config import get_settings
from ..core.errors import RecipeFetchError
from ..core.trace_logger import get_trace_logger
from ..pipeline import RecipePipeline, get_pipeline
from ..schemas.recipe import Language, Recipe

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recipes"])


class RecipeRequest(BaseModel):
    prompt: str = Field(min_length=1, description="Free-text cooking request")
    language: Language = "en"


class RecipeBatchResponse(BaseModel):
    recipes: List[Recipe]
    recipe_count: int = 0
    images_generated: int = 0


@router.post("/recipes", response_model=RecipeBatchResponse)
async def generate_recipes(
    request: RecipeRequest,
    pipeline: RecipePipeline = Depends(get_pipeline),
):
    request_id = str(uuid.uuid4())[:8]
    started = time.perf_counter()
    trace = get_trace_logger()

    try:
        recipes = await pipeline.fetch_recipes(request.prompt, request.language)
    except RecipeFetchError as e:
        trace.log_recipe_run(
            request_id=request_id,
            prompt=request.prompt,
            language=request.language,
            recipe_count=0,
            images_generated=0,
            duration_ms=(time.perf_counter() - started) * 1000,
            error=repr(e.__cause__ or e),
        )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except Exception as e:
        logger.error("[%s] recipe generation error: %s", request_id, e, exc_info=True)
        trace.log_recipe_run(
            request_id=request_id,
            prompt=request.prompt,
            language=request.language,
            recipe_count=0,
            images_generated=0,
            duration_ms=(time.perf_counter() - started) * 1000,
            error=repr(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong. Please try again.",
        )

    images_generated = sum(1 for r in recipes if r.has_image)
    trace.log_recipe_run(
        request_id=request_id,
        prompt=request.prompt,
        language=request.language,
        recipe_count=len(recipes),
        images_generated=images_generated,
        duration_ms=(time.perf_counter() - started) * 1000,
    )

    return RecipeBatchResponse(
        recipes=recipes,
        recipe_count=len(recipes),
        images_generated=images_generated,
    )


@router.get("/health")
async def health():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


@router.get("/status")
async def get_status():
    """Configured models and credentials (never the key itself)."""
    settings = get_settings()
    return {
        "status": "operational",
        "version": settings.app_version,
        "openai_api_key_set": bool(settings.openai_api_key),
        "models": {
            "text": settings.text_model,
            "image": settings.image_model,
        },
        "image_size": settings.image_size,
        "image_timeout_seconds": settings.image_timeout_seconds,
        "trace_logging": settings.enable_trace_logging,
    }
