"""
Application exception hierarchy.

Services raise these; global handlers registered in app.main turn them into
JSON error responses with the matching HTTP status.

    RecipeAppError (base)
    ├── ValidationError        → 400 Bad Request
    ├── AuthenticationError    → 401 Unauthorized
    │   ├── MalformedTokenError
    │   └── TokenExpiredError
    ├── AuthorizationError     → 403 Forbidden
    ├── NotFoundError          → 404 Not Found
    └── ConflictError          → 409 Conflict

All of them are terminal for the request; nothing here is retried.
"""

from typing import Any


class RecipeAppError(Exception):
    """
    Base exception for application errors.

    message is safe to return to the client; context is for server-side logs.
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)


class ValidationError(RecipeAppError):
    """Client input failed a field or business rule."""

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(RecipeAppError):
    """Missing, malformed, expired or mismatched credentials."""

    status_code = 401
    error_code = "authentication_error"

    def __init__(
        self,
        message: str = "Not authenticated",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)


class MalformedTokenError(AuthenticationError):
    """Token cannot be parsed or its signature does not verify."""

    def __init__(
        self,
        message: str = "Invalid token",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)


class TokenExpiredError(AuthenticationError):
    """Token signature is valid but its exp claim has passed."""

    def __init__(
        self,
        message: str = "Token has expired",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)


class AuthorizationError(RecipeAppError):
    """Authenticated caller lacks rights over the target resource."""

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        message: str = "You are not allowed to modify this resource",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)


class NotFoundError(RecipeAppError):
    """Target resource does not exist."""

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: int | str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(RecipeAppError):
    """Duplicate username, email or like."""

    status_code = 409
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, context=context)
