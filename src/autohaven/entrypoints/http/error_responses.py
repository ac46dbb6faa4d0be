"""REST API error response models.

Documents the JSON shape produced by the exception handlers so it shows up in
the OpenAPI schema of every route.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level failure inside a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "rating",
                "message": "Must be between 1 and 5",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier '7' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "carId", "message": "Field required", "code": "missing"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier '7' not found", "code": "NOT_FOUND"},
                {"detail": "Car already in favorites", "code": "ALREADY_FAVORITED"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "carId", "message": "Field required", "code": "missing"},
                    ],
                },
            ]
        }
    )

