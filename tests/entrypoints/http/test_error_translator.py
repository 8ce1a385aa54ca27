"""
Test suite for ErrorTranslator.

Verifies:
- Every error kind maps to exactly one HTTP status and code
- Domain messages are passed through for client errors
- Unauthorized and unexpected failures use fixed generic messages
- Request validation errors collapse to a field -> message map
- 5xx failures are logged with the traceback, 4xx at info level
"""

from __future__ import annotations

import json
import logging

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from autocare.domain.errors import (
    DomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from autocare.domain.paging import InvalidPageNumberError, InvalidPageSizeError
from autocare.domain.sorting import (
    InvalidSortDirectionError,
    InvalidSortFieldError,
    allowed_sort_directions,
    allowed_sort_fields,
)
from autocare.entrypoints.http.error_translator import STATUS_BY_KIND, ErrorKind, ErrorTranslator

PATH = "/api/v1/vehicles"


@pytest.fixture()
def translator() -> ErrorTranslator:
    return ErrorTranslator()


def _request_validation_error(*items: dict) -> RequestValidationError:
    return RequestValidationError(list(items))


# ==============================================================================
# Kind -> status
# ==============================================================================


def test_every_kind_has_a_status() -> None:
    assert set(STATUS_BY_KIND) == set(ErrorKind)


@pytest.mark.parametrize(
    ("error", "status", "code"),
    [
        (NotFoundError("Vehicle", 42), 404, "NOT_FOUND"),
        (InvalidSortFieldError("color", allowed_sort_fields()), 400, "INVALID_SORT_FIELD"),
        (InvalidSortDirectionError("UP", allowed_sort_directions()), 400, "INVALID_SORT_DIRECTION"),
        (InvalidPageNumberError(-1), 400, "INVALID_PAGE_NUMBER"),
        (InvalidPageSizeError(0), 400, "INVALID_PAGE_SIZE"),
        (ValidationError(errors={"pageSize": "too big"}), 400, "VALIDATION_ERROR"),
        (UnauthorizedError("bad key"), 401, "UNAUTHORIZED"),
        (StarletteHTTPException(404, "Not Found"), 404, "NOT_FOUND"),
        (StarletteHTTPException(405, "Method Not Allowed"), 405, "METHOD_NOT_ALLOWED"),
        (StarletteHTTPException(401), 401, "UNAUTHORIZED"),
        (StarletteHTTPException(413, "Payload Too Large"), 413, "HTTP_ERROR"),
        (StarletteHTTPException(503), 500, "INTERNAL_ERROR"),
        (DomainError("unmapped"), 500, "INTERNAL_ERROR"),
        (RuntimeError("boom"), 500, "INTERNAL_ERROR"),
    ],
)
def test_translate_status_and_code(
    translator: ErrorTranslator, error: Exception, status: int, code: str
) -> None:
    payload = translator.translate(error, PATH)

    assert payload.status == status
    assert payload.code == code
    assert payload.path == PATH


# ==============================================================================
# Messages
# ==============================================================================


def test_not_found_message_names_identifier(translator: ErrorTranslator) -> None:
    payload = translator.translate(NotFoundError("Vehicle", 42), "/api/v1/vehicles/42")

    assert payload.message == "Vehicle with identifier '42' not found"
    assert payload.errors is None


def test_sort_direction_message_lists_allowed_values(translator: ErrorTranslator) -> None:
    payload = translator.translate(
        InvalidSortDirectionError("INVALID", allowed_sort_directions()), PATH
    )

    assert payload.message == "Invalid sort direction 'INVALID'. Allowed values are: [ASC, DESC]."


def test_unauthorized_message_is_generic(translator: ErrorTranslator) -> None:
    payload = translator.translate(UnauthorizedError("Missing or invalid API key"), PATH)

    assert payload.message == "Authentication required"


@pytest.mark.parametrize(
    "error", [RuntimeError("password=hunter2"), StarletteHTTPException(502, "SELECT * FROM secrets")]
)
def test_unexpected_errors_never_leak_details(
    translator: ErrorTranslator, error: Exception
) -> None:
    payload = translator.translate(error, PATH)

    assert payload.message == "An unexpected error occurred"
    assert "hunter2" not in payload.model_dump_json()
    assert "secrets" not in payload.model_dump_json()


def test_domain_validation_error_carries_field_map(translator: ErrorTranslator) -> None:
    payload = translator.translate(
        ValidationError(errors={"pageSize": "too big", "view": "unknown"}), PATH
    )

    assert payload.message == "Validation error"
    assert payload.errors == {"pageSize": "too big", "view": "unknown"}


# ==============================================================================
# Request validation errors
# ==============================================================================


def test_request_validation_error_to_field_map(translator: ErrorTranslator) -> None:
    error = _request_validation_error(
        {"loc": ("query", "pageSize"), "msg": "Input should be less than or equal to 200", "type": "x"},
        {"loc": ("query", "pageNumber"), "msg": "Input should be a valid integer", "type": "y"},
    )

    payload = translator.translate(error, PATH)

    assert payload.status == 400
    assert payload.code == "VALIDATION_ERROR"
    assert payload.message == "Validation error"
    assert payload.errors == {
        "pageSize": "Input should be less than or equal to 200",
        "pageNumber": "Input should be a valid integer",
    }


def test_field_errors_first_message_wins_and_nested_paths_are_joined() -> None:
    error = _request_validation_error(
        {"loc": ("query", "pageSize"), "msg": "first", "type": "x"},
        {"loc": ("query", "pageSize"), "msg": "second", "type": "x"},
        {"loc": ("body", "filters", 0, "make"), "msg": "nested", "type": "x"},
        {"loc": (), "msg": "whole request", "type": "x"},
    )

    assert ErrorTranslator.field_errors(error) == {
        "pageSize": "first",
        "filters.0.make": "nested",
        "request": "whole request",
    }


# ==============================================================================
# Responses and logging
# ==============================================================================


def test_to_response_omits_errors_when_absent(translator: ErrorTranslator) -> None:
    response = translator.to_response(NotFoundError("Vehicle", 1), "/api/v1/vehicles/1")

    assert response.status_code == 404
    assert json.loads(response.body) == {
        "status": 404,
        "code": "NOT_FOUND",
        "message": "Vehicle with identifier '1' not found",
        "path": "/api/v1/vehicles/1",
    }


def test_server_errors_are_logged_with_traceback(
    translator: ErrorTranslator, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="autocare.entrypoints.http.error_translator")

    translator.translate(RuntimeError("boom"), PATH)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None
    assert record.error_code == "INTERNAL_ERROR"  # type: ignore[attr-defined]
    assert record.error_type == "RuntimeError"  # type: ignore[attr-defined]


def test_client_errors_are_logged_at_info(
    translator: ErrorTranslator, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="autocare.entrypoints.http.error_translator")

    translator.translate(NotFoundError("Vehicle", 1), PATH)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.status_code == 404  # type: ignore[attr-defined]


# ==============================================================================
# Framework HTTP errors
# ==============================================================================


def test_framework_error_keeps_detail_as_message(translator: ErrorTranslator) -> None:
    payload = translator.translate(StarletteHTTPException(405, "Method Not Allowed"), PATH)

    assert payload.message == "Method Not Allowed"
    assert payload.errors is None


def test_framework_error_headers_are_kept(translator: ErrorTranslator) -> None:
    error = StarletteHTTPException(405, "Method Not Allowed", headers={"Allow": "GET"})

    response = translator.to_response(error, PATH)

    assert response.status_code == 405
    assert response.headers["allow"] == "GET"
    assert json.loads(response.body)["code"] == "METHOD_NOT_ALLOWED"
