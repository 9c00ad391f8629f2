"""
FastAPI application for the Video Digest backend.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from video_digest.config import config
from video_digest.api.routes import DOWNLOADS_ROUTE, router
from video_digest.core.genai_client import create_genai_client
from video_digest.utils.error_handling import register_exception_handlers
from video_digest.utils.logger import logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared Gemini client once the server starts."""
    app_config = app.state.config
    if app.state.genai_client is None:
        app.state.genai_client = create_genai_client(app_config)

    logging.info(f"{app_config.APP_NAME} started, downloads stored in {app_config.DOWNLOADS_DIR}")
    yield
    logging.info(f"{app_config.APP_NAME} shutting down")


def create_app(app_config=None, genai_client=None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        app_config: Configuration class (defaults to the environment's config)
        genai_client: Pre-built Gemini client; built from app_config at startup when None

    Returns:
        Configured FastAPI application
    """
    app_config = app_config or config
    app_config.initialize()
    logging.setLevel(getattr(app_config, "LOG_LEVEL", "INFO"))

    app = FastAPI(
        title=app_config.APP_NAME,
        version=app_config.APP_VERSION,
        description="An API for downloading, transcribing, and summarizing YouTube videos",
        lifespan=lifespan,
    )
    app.state.config = app_config
    app.state.genai_client = genai_client

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    register_exception_handlers(app)

    # Include API router
    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": app_config.APP_NAME,
            "version": app_config.APP_VERSION,
            "description": "Video download, transcription and summarization API",
        }

    app.mount(DOWNLOADS_ROUTE, StaticFiles(directory=str(app_config.DOWNLOADS_DIR)), name="downloads")

    return app


app = create_app()
