"""
Error handling decorators and utilities for API endpoints.

Centralizes the mapping from application exceptions to HTTP responses so
every endpoint reports errors as {"error": "..."} bodies.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from constants import ErrorMessages, HTTPStatus
from exceptions import (
    ApplicationError,
    ConfigurationError,
    ContactAlreadyExistsError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    """Standard error body."""
    return {"error": message}


def _to_http_exception(operation_name: str, e: Exception) -> HTTPException:
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.message)
    if isinstance(e, ContactAlreadyExistsError):
        logger.warning(f"{operation_name} - Conflict: {e.message}")
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=e.message)
    if isinstance(e, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {e.message}", exc_info=True)
    elif isinstance(e, StoreError):
        logger.error(f"{operation_name} - Store error: {e.message}", exc_info=True)
    elif isinstance(e, ApplicationError):
        logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
    else:
        logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
    # Internal details stay in the logs
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=ErrorMessages.INTERNAL_ERROR
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle API errors consistently across endpoints.

    Application exceptions escaping the endpoint are converted to
    HTTPException responses; unexpected exceptions become a generic 500
    that leaks no internal detail.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Contact creation")

    Example:
        @router.post("/contacts")
        @handle_api_errors("Contact creation")
        async def create_contact(...):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e)

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for exceptions no endpoint caught."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=error_body(ErrorMessages.INTERNAL_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
