"""Error Handlers — global exception handlers for the FocusTools API.

Invariants:
    - Every error response body is {"error": <category>, "message": <detail>}
    - FocusToolsError → its own status and category
    - RequestValidationError → 400 "Validation error" with a readable message
    - Exception (catch-all) → 500 "Server error"; detail redacted unless
      expose_internal_errors is set

Design Decisions:
    - Three-layer handler: domain (FocusToolsError), validation (Pydantic), catch-all (Exception)
    - Validator messages (ValueError text) are passed through as-is; other Pydantic
      errors are prefixed with the offending field
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from focustools.config import get_settings
from focustools.core.errors import ErrorCategory, ErrorSeverity, FocusToolsError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register FocusTools domain/store error handler."""

    @app.exception_handler(FocusToolsError)
    async def focustools_error_handler(request: Request, exc: FocusToolsError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": ErrorCategory.VALIDATION.value,
                "message": format_validation_errors(exc.errors()),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        message = (
            str(exc) if get_settings().expose_internal_errors
            else "An unexpected error occurred"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ErrorCategory.SERVER.value, "message": message},
        )


def format_validation_errors(errors) -> str:
    """Collapse Pydantic error entries into one client-facing message."""
    messages = []
    for e in errors:
        messages.append(_format_one(e))
    return "; ".join(messages) or "Invalid request data"


def _format_one(error: dict) -> str:
    ctx_error = (error.get("ctx") or {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)
    # loc is ("body", field, ...) for request bodies
    field = ".".join(str(part) for part in error.get("loc", ())[1:])
    if error.get("type") == "missing" and field:
        return f"{field} is required"
    if field:
        return f"{field}: {error.get('msg')}"
    return str(error.get("msg"))
