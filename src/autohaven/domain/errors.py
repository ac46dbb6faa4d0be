"""Domain error classes.

Transport-neutral failures raised by use cases. The HTTP entrypoint maps each
``error_code`` to a status code and a structured JSON body.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus arbitrary context that ends up in
    the serialized error payload.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a structured payload for the transport layer."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed or missing input detected at the boundary.

    Examples:
        - rating outside 1..5
        - message with empty content
        - favorite request without a car id

    REST: 400 Bad Request with field-level ``errors``.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall message (optional if errors are provided)
            errors: Field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "carId", "message": "Field required"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """A referenced record does not exist.

    Examples:
        - Car with ID not found
        - Favorite for (user, car) not found

    REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: int | str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "User")
            identifier: Record identifier
            **context: Additional context
        """
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Storage-level constraint conflict.

    REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class FavoriteAlreadyExistsError(ConflictError):
    """The (user, car) pair is already a favorite.

    Raised by the use case pre-check and by the stores themselves, so two
    concurrent requests cannot both insert the same pair.

    REST: 400 Bad Request
    """

    error_code: str = "ALREADY_FAVORITED"

    def __init__(self, user_id: int, car_id: int) -> None:
        super().__init__("Car already in favorites", user_id=user_id, car_id=car_id)


class UnauthorizedError(DomainError):
    """No authenticated session.

    REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Authenticated, but not the owner of the record.

    REST: 403 Forbidden
    """

    error_code: str = "FORBIDDEN"


class InternalError(DomainError):
    """Unexpected condition inside the domain. Logged for investigation.

    REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
