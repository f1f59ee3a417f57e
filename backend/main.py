"""
Recipe AI API
=============

Main entry point for the recipe generation backend.

Features:
- Structured recipe generation under a strict JSON schema
- One generated image per recipe, in parallel, with graceful degradation
- JSONL trace of every generation request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_ai.api.routes import router as api_router
from recipe_ai.core.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Text model: {settings.text_model}")
    logger.info(f"Image model: {settings.image_model}")
    logger.info(f"Trace logging: {'ON' if settings.enable_trace_logging else 'OFF'}")

    yield

    logger.info(f"Shutting down {settings.app_name}.")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Turns a free-text cooking request into structured, illustrated recipes",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url=None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "version": settings.app_version,
        "text_model": settings.text_model,
        "image_model": settings.image_model,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
