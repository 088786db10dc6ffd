"""API errors - every store or provider failure becomes one generic 500."""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from app.repositories.errors import StoreError
from provider_client.errors import ProviderError

GENERIC_ERROR_MESSAGE = "Sorry something went wrong!"


async def handle_lookup_error(request: Request, exc: Exception) -> PlainTextResponse:
    """Log the failure and answer with the uniform error response."""
    logger.opt(exception=exc).error("{} {} failed: {}", request.method, request.url.path, exc)
    return PlainTextResponse(GENERIC_ERROR_MESSAGE, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, handle_lookup_error)
    app.add_exception_handler(ProviderError, handle_lookup_error)
