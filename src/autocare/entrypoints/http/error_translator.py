"""Translation of failures into the structured HTTP error payload.

Every failure the API reports passes through ErrorTranslator exactly once,
whether it arrives as an Err result from a use case or as an exception caught
by a registered exception handler.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from autocare.domain.errors import DomainError, ValidationError
from autocare.entrypoints.http.error_responses import ErrorPayload

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_SORT_FIELD = "INVALID_SORT_FIELD"
    INVALID_SORT_DIRECTION = "INVALID_SORT_DIRECTION"
    INVALID_PAGE_NUMBER = "INVALID_PAGE_NUMBER"
    INVALID_PAGE_SIZE = "INVALID_PAGE_SIZE"
    FIELD_VALIDATION = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    HTTP_ERROR = "HTTP_ERROR"  # any other framework-raised status, kept as-is
    UNHANDLED = "INTERNAL_ERROR"


STATUS_BY_KIND: Mapping[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
        ErrorKind.INVALID_SORT_FIELD: status.HTTP_400_BAD_REQUEST,
        ErrorKind.INVALID_SORT_DIRECTION: status.HTTP_400_BAD_REQUEST,
        ErrorKind.INVALID_PAGE_NUMBER: status.HTTP_400_BAD_REQUEST,
        ErrorKind.INVALID_PAGE_SIZE: status.HTTP_400_BAD_REQUEST,
        ErrorKind.FIELD_VALIDATION: status.HTTP_400_BAD_REQUEST,
        ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
        ErrorKind.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
        ErrorKind.HTTP_ERROR: status.HTTP_400_BAD_REQUEST,
        ErrorKind.UNHANDLED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }
)

# Kinds whose caller-facing message is fixed, never taken from the error
GENERIC_MESSAGES: Mapping[ErrorKind, str] = MappingProxyType(
    {
        ErrorKind.UNAUTHORIZED: "Authentication required",
        ErrorKind.UNHANDLED: "An unexpected error occurred",
    }
)

VALIDATION_MESSAGE = "Validation error"

# Framework-raised statuses with a dedicated kind
_KIND_BY_HTTP_STATUS: Mapping[int, ErrorKind] = MappingProxyType(
    {
        status.HTTP_401_UNAUTHORIZED: ErrorKind.UNAUTHORIZED,
        status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED: ErrorKind.METHOD_NOT_ALLOWED,
    }
)

# Location prefixes FastAPI adds to request validation errors
_LOCATION_PREFIXES = ("query", "path", "header", "body", "cookie")


class ErrorTranslator:
    """Stateless mapping from failure kind to ErrorPayload."""

    @staticmethod
    def kind_of(error: BaseException) -> ErrorKind:
        if isinstance(error, RequestValidationError):
            return ErrorKind.FIELD_VALIDATION
        if isinstance(error, StarletteHTTPException):
            if error.status_code >= 500:
                return ErrorKind.UNHANDLED
            return _KIND_BY_HTTP_STATUS.get(error.status_code, ErrorKind.HTTP_ERROR)
        if isinstance(error, DomainError):
            try:
                return ErrorKind(error.error_code)
            except ValueError:
                # Unknown domain codes are not part of the public contract
                return ErrorKind.UNHANDLED
        return ErrorKind.UNHANDLED

    def translate(self, error: BaseException, path: str) -> ErrorPayload:
        """Build the single payload describing this failure."""
        kind = self.kind_of(error)
        status_code = STATUS_BY_KIND[kind]
        if kind is ErrorKind.HTTP_ERROR and isinstance(error, StarletteHTTPException):
            status_code = error.status_code

        errors: dict[str, str] | None = None
        if isinstance(error, RequestValidationError):
            errors = self.field_errors(error)
            message = VALIDATION_MESSAGE
        elif kind in GENERIC_MESSAGES:
            message = GENERIC_MESSAGES[kind]
        elif isinstance(error, DomainError):
            message = error.message
            if isinstance(error, ValidationError):
                errors = error.errors
        elif isinstance(error, StarletteHTTPException):
            message = str(error.detail)
        else:
            message = GENERIC_MESSAGES[ErrorKind.UNHANDLED]

        self._log(error, kind, status_code, path)

        return ErrorPayload(
            status=status_code,
            code=kind.value,
            message=message,
            path=path,
            errors=errors,
        )

    def to_response(self, error: BaseException, path: str) -> JSONResponse:
        payload = self.translate(error, path)
        # Framework errors may carry required headers (Allow on 405)
        headers = error.headers if isinstance(error, StarletteHTTPException) else None
        return JSONResponse(
            status_code=payload.status,
            content=payload.model_dump(exclude_none=True),
            headers=headers,
        )

    @staticmethod
    def field_errors(error: RequestValidationError) -> dict[str, str]:
        """Collapse FastAPI validation errors to a field -> message map (first message wins)."""
        errors: dict[str, str] = {}
        for item in error.errors():
            location = [str(part) for part in item.get("loc", ())]
            if location and location[0] in _LOCATION_PREFIXES:
                location = location[1:]
            field_path = ".".join(location) or "request"
            errors.setdefault(field_path, item.get("msg", "Invalid value"))
        return errors

    @staticmethod
    def _log(error: BaseException, kind: ErrorKind, status_code: int, path: str) -> None:
        if status_code >= 500:
            logger.error(
                "Unexpected error occurred",
                exc_info=error,
                extra={
                    "error_code": kind.value,
                    "error_type": type(error).__name__,
                    "path": path,
                },
            )
        else:
            logger.info(
                "Client error",
                extra={
                    "error_code": kind.value,
                    "status_code": status_code,
                    "path": path,
                },
            )
