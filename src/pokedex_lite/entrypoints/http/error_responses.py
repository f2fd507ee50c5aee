"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
The remote backend client decodes these back into domain errors using
``code`` and ``context``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "generation",
                "message": "Must be one of 1, 2, 3, 4, 5, 6, 7, 8, 9",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Business errors carrying context (e.g. team and capacity for TEAM_FULL)

    Examples:
        Business error:
            {
                "detail": "Team Alpha is full (6/6)",
                "code": "TEAM_FULL",
                "context": {"team": "Alpha", "capacity": 6}
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "generation",
                        "message": "Must be one of 1, 2, 3, 4, 5, 6, 7, 8, 9",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    context: dict[str, Any] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Species 25 is already in your roster", "code": "DUPLICATE_SPECIES"},
                {
                    "detail": "Team Alpha is full (6/6)",
                    "code": "TEAM_FULL",
                    "context": {"team": "Alpha", "capacity": 6},
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "generation",
                            "message": "Must be one of 1, 2, 3, 4, 5, 6, 7, 8, 9",
                            "code": "INVALID_VALUE",
                        }
                    ],
                },
            ]
        }
    )
