"""Exception handlers rendering every failure as an {"error": ...} envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize request validation errors for the client."""
    errors = exc.errors()
    if any(err["loc"] and err["loc"][0] == "path" for err in errors):
        return "Invalid ID"
    if any(err["type"] == "json_invalid" for err in errors):
        return "Malformed JSON body"

    parts = []
    for err in errors:
        field = ".".join(str(part) for part in err["loc"][1:])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Unhandled database error on {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error envelope on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
