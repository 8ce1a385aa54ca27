"""FastAPI exception handlers.

Failures raised outside a use case result (authentication, request parsing,
routing, unexpected exceptions) are rendered through the same ErrorTranslator the
routes use for Err results.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from autocare.domain.errors import DomainError
from autocare.entrypoints.http.error_translator import ErrorTranslator

logger = logging.getLogger(__name__)

_translator = ErrorTranslator()


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors raised during request processing (e.g. UnauthorizedError).

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with the structured error payload
    """
    return _translator.to_response(exc, request.url.path)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    These are type errors, format errors, constraint violations at the HTTP layer.

    Examples:
        - pageNumber=abc (not an integer)
        - pageSize=500 (exceeds max constraint)
        - view=table (not an accepted response variant)

    Returns:
        JSON response with 400 status and a field -> message map
    """
    return _translator.to_response(exc, request.url.path)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle framework HTTP errors such as unknown routes (404) and wrong methods (405)."""
    return _translator.to_response(exc, request.url.path)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors.

    These should be rare and indicate bugs or infrastructure issues.
    Logged with full traceback by the translator; the caller gets a generic message.
    """
    return _translator.to_response(exc, request.url.path)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    This should be called once during app initialization.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
