"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to a single structured HTTP payload by the ErrorTranslator.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to an HTTP error payload.
    """

    # Default error code (also the error "kind" used by the translator)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., parameter names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)


class ValidationError(DomainError):
    """Request or business rule validation error.

    Examples:
        - Malformed query parameter (not an integer)
        - Page size above the accepted maximum
        - Sort field outside the allow-list

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: dict[str, str] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific messages keyed by field name
                   Example: {"pageSize": "Input should be less than or equal to 200"}
            **context: Additional context
        """
        self.errors: dict[str, str] | None
        if errors:
            self.errors = dict(errors)
            msg = message or "Validation error"
        else:
            self.errors = None
            msg = message or "Invalid request"

        super().__init__(msg, **context)


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: Any = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Vehicle")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UnauthorizedError(DomainError):
    """Authentication required or failed.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"

