"""API key guard for the vehicle endpoints.

Credentials are an external concern: this module only checks a shared key
from the environment and surfaces failures as UnauthorizedError, which the
ErrorTranslator renders as a 401 payload.
"""

from __future__ import annotations

import os
import secrets

from fastapi import Depends
from fastapi.security import APIKeyHeader

from autocare.domain.errors import UnauthorizedError

API_KEY_HEADER = "X-API-Key"

_api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def configured_api_key() -> str | None:
    """Expected key from AUTOCARE_API_KEY; None or empty disables the check."""
    return os.getenv("AUTOCARE_API_KEY") or None


def require_api_key(
    provided: str | None = Depends(_api_key_header),
    expected: str | None = Depends(configured_api_key),
) -> None:
    if expected is None:
        return
    if provided is None or not secrets.compare_digest(provided, expected):
        raise UnauthorizedError("Missing or invalid API key", header=API_KEY_HEADER)
