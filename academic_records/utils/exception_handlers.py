"""Centralized exception handlers for the FastAPI application."""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from academic_records.exceptions import (
    DatabaseConnectionError,
    MissingFieldsError,
    ModelError,
    RecordNotFoundError,
    RuleViolation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExceptionConfig:
    """Configuration for exception handler behavior.

    A None ``status_code`` means the exception carries its own
    (``RuleViolation.status_code``).
    """

    status_code: int | None
    error_name: str | None
    log_level: str = "warning"
    include_detail: bool = True


# Exception type to configuration mapping
EXCEPTION_CONFIGS: dict[type[Exception], ExceptionConfig] = {
    RuleViolation: ExceptionConfig(
        status_code=None,
        error_name=None,
        log_level="info",
    ),
    RecordNotFoundError: ExceptionConfig(
        status_code=status.HTTP_404_NOT_FOUND,
        error_name="Not Found",
    ),
    DatabaseConnectionError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
    ),
    ModelError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Bad Request",
        log_level="error",
    ),
}


def _log_exception(request: Request, exc: Exception, config: ExceptionConfig) -> None:
    """Log exception with appropriate level."""
    log_func: Callable[..., None] = getattr(logger, config.log_level)
    extra: dict[str, Any] = {"path": request.url.path, "method": request.method}
    if isinstance(exc, RuleViolation):
        extra.update(kind=exc.kind, code=exc.code, target=exc.target)
    log_func(f"{type(exc).__name__}: {exc}", extra=extra)


def _status_code(exc: Exception, config: ExceptionConfig) -> int:
    if config.status_code is None and isinstance(exc, RuleViolation):
        return exc.status_code
    return config.status_code or status.HTTP_400_BAD_REQUEST


def _build_response_content(exc: Exception, config: ExceptionConfig) -> dict[str, Any]:
    """Build response content based on exception type."""
    if isinstance(exc, RuleViolation):
        content: dict[str, Any] = {
            "error": exc.kind,
            "message": exc.message,
            "target": exc.target,
            "code": exc.code,
        }
        if isinstance(exc, MissingFieldsError):
            content["missing"] = exc.missing
        return content

    content = {"error": config.error_name}
    if isinstance(exc, DatabaseConnectionError):
        content["message"] = "Database connection error. Please try again later."
    elif config.include_detail:
        content["message"] = str(exc)

    if isinstance(exc, RecordNotFoundError):
        content["model"] = exc.model_name
        content["record_id"] = exc.record_id

    return content


def _create_handler(
    config: ExceptionConfig,
) -> Callable[[Request, Exception], Any]:
    """Create exception handler function for given config."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        _log_exception(request, exc, config)
        return JSONResponse(
            status_code=_status_code(exc, config),
            content=_build_response_content(exc, config),
        )

    return handler


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": exc.errors(),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    for exc_type, config in EXCEPTION_CONFIGS.items():
        app.add_exception_handler(exc_type, _create_handler(config))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
