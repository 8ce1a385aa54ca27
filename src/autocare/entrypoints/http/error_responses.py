"""REST API error response models.

One structured payload shape for every HTTP error the API emits.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorPayload(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (status, code, message, path)
    - Multi-field validation errors (same fields + errors map)
    - Enumerated-input errors list the allowed values inside the message

    Examples:
        Simple error:
            {
                "status": 404,
                "code": "NOT_FOUND",
                "message": "Vehicle with identifier '42' not found",
                "path": "/api/v1/vehicles/42"
            }

        Validation error with multiple fields:
            {
                "status": 400,
                "code": "VALIDATION_ERROR",
                "message": "Validation error",
                "path": "/api/v1/vehicles",
                "errors": {
                    "pageSize": "Input should be less than or equal to 200",
                    "view": "Input should be 'page' or 'list'"
                }
            }
    """

    status: int = Field(description="HTTP status code")
    code: str = Field(description="Machine-readable error kind")
    message: str = Field(description="Human-readable message")
    path: str = Field(description="Request path that produced the error")
    errors: dict[str, str] | None = Field(
        default=None,
        description="Field name to message map for multi-field validation failures",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "status": 400,
                    "code": "INVALID_SORT_DIRECTION",
                    "message": "Invalid sort direction 'UP'. Allowed values are: [ASC, DESC].",
                    "path": "/api/v1/vehicles",
                },
                {
                    "status": 400,
                    "code": "VALIDATION_ERROR",
                    "message": "Validation error",
                    "path": "/api/v1/vehicles",
                    "errors": {"pageSize": "Input should be less than or equal to 200"},
                },
            ]
        },
    )
