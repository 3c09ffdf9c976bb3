# storefront/api/errors.py
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.errors import InvalidState, NotFound, ValidationFailed
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _error_body(request: Request, code: int, message: str) -> dict:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": code,
        "error": message,
        "path": request.url.path,
    }


def _field_name(loc) -> str:
    #("body", "price") -> "price", ("query", "limit") -> "limit"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(request, status.HTTP_404_NOT_FOUND, str(exc)),
    )


async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error["loc"]), error["msg"])
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def invalid_state_handler(request: Request, exc: InvalidState):
    logger.error(f"Invalid aggregate state on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidState, invalid_state_handler)
