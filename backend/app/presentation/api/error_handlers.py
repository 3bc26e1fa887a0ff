"""Exception handlers that render every error in the `{success: false, ...}` envelope."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.schemas import ErrorEnvelope

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "The given data was invalid."


def _error_response(
    status_code: int,
    message: str,
    errors: dict[str, list[str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorEnvelope(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


BODY_FIELD = "body"


def _field_name(error: dict[str, Any]) -> str:
    # ("body", "title") → "title". Malformed JSON reports a character offset
    # instead of a key; that and a missing or non-object body map to "body".
    parts = tuple(error.get("loc", ()))[1:]
    if error.get("type") == "json_invalid" or not parts or not all(isinstance(p, str) for p in parts):
        return BODY_FIELD
    return ".".join(parts)


def _field_message(field: str, error: dict[str, Any]) -> str:
    kind = error.get("type")
    ctx = error.get("ctx") or {}
    if kind == "json_invalid":
        return "The request body must be valid JSON."
    if kind == "missing":
        return f"The {field} field is required."
    if kind == "string_type":
        return f"The {field} field must be a string."
    if kind == "string_too_long":
        return f"The {field} field must not be greater than {ctx.get('max_length')} characters."
    if kind == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value.")


def format_validation_errors(errors: list[dict[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic errors by field into human-readable messages."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(error)
        grouped.setdefault(field, []).append(_field_message(field, error))
    return grouped


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        422,
        VALIDATION_MESSAGE,
        errors=format_validation_errors(list(exc.errors())),
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown method on a known path is reported like any other unmatched route.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return _error_response(status.HTTP_404_NOT_FOUND, "Not Found")
    return _error_response(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def _store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _store_failure_handler)
