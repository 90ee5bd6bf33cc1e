"""
Global exception handlers: map application errors to HTTP responses.

    ValidationError / RequestValidationError → 400
    AuthenticationError                      → 401
    AuthorizationError                       → 403
    NotFoundError                            → 404
    ConflictError                            → 409
    anything else                            → 500 (generic message, trace logged)

Response body: {"error": <code>, "message": <text>} plus "details" for validation.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AuthenticationError, RecipeAppError, ValidationError

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecipeAppError)
    async def handle_app_error(request: Request, exc: RecipeAppError) -> JSONResponse:
        content: dict = {"error": exc.error_code, "message": exc.message}
        headers = None
        if isinstance(exc, ValidationError) and exc.field:
            content["details"] = [{"field": exc.field, "message": exc.message}]
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}
        logger.info(
            "%s %s -> %s %s: %s",
            request.method,
            request.url.path,
            exc.status_code,
            type(exc).__name__,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=content, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = _field_errors(exc)
        message = details[0]["message"] if details else "Validation failed"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "validation_error", "message": message, "details": details},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
            },
        )
