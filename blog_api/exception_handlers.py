"""
Translate exceptions into the API's error body ``{status, message, timestamp}``.

| Exception                 | Status |
|---------------------------|--------|
| RequestValidationError    | 400 (with per-field ``errors``) |
| ResourceNotFoundError     | 404 |
| HTTPException             | its own status code |
| StorageError / Exception  | 500, generic message |
"""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse

from blog_api.exceptions import ResourceNotFoundError, StorageError
from blog_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)

SERVER_FAULT_MESSAGE = "An unexpected error occurred"


def error_response(status: int, message: str, errors: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorResponse(
        status=status,
        message=message,
        timestamp=datetime.now(timezone.utc),
        errors=errors,
    )
    return JSONResponse(
        status_code=status,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def _field_name(loc: tuple) -> str:
    # Drop the leading "body" / "path" / "query" segment.
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    errors = {_field_name(tuple(err["loc"])): err["msg"] for err in exc.errors()}
    return error_response(400, "Validation failed", errors)


async def not_found_exception_handler(_request: Request, exc: ResourceNotFoundError):
    return error_response(404, str(exc))


async def http_exception_handler(_request: Request, exc: HTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error("%s %s failed in storage: %s", request.method, request.url.path, exc)
    return error_response(500, SERVER_FAULT_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, SERVER_FAULT_MESSAGE)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ResourceNotFoundError, not_found_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
