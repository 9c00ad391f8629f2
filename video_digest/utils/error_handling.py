"""
Centralized error handling for the application.

Every error leaves the API as a JSON body of the form ``{"error": "..."}``.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from video_digest.utils.logger import logging


class AppError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingInputError(AppError):
    """A required request field was not supplied."""

    status_code = 400


class InvalidInputError(AppError):
    """A request field has a value the server cannot use."""

    status_code = 400


class FileMissingError(AppError):
    """A referenced stored file does not exist."""

    status_code = 404


class DownstreamError(AppError):
    """A subprocess, network call or external API failed."""

    status_code = 500


class DownloadError(DownstreamError):
    """yt-dlp exited with an error or could not be started."""


class GeminiNotConfiguredError(DownstreamError):
    """No Gemini client is available because the API key is missing."""

    def __init__(self, message: str = "Gemini API key is not configured"):
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError):
    """Render application errors."""
    if exc.status_code >= 500:
        logging.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logging.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors, e.g. unknown static files."""
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == 404 and request.url.path.startswith("/downloads/"):
        message = "File not found"
    return error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies count as missing input."""
    logging.info(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
    return error_response(500, f"An unexpected error occurred: {str(exc)}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
