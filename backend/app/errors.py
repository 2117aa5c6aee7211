"""Exception handlers: validation failures become 400, store failures a generic 500."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def _describe(error: dict) -> str:
    loc = [str(part) for part in error.get("loc") or () if part not in ("body", "query", "path")]
    path = ".".join(loc)
    kind = error.get("type", "")
    msg = error.get("msg", "Invalid value")

    if kind == "missing":
        return f"Missing required field: {path}"
    if kind == "json_invalid":
        return "Invalid JSON body"
    if kind == "value_error" and msg.startswith("Value error, "):
        # model validators and EmailStr both land here
        msg = msg[len("Value error, "):]
        if not path:
            return msg
    return f"Invalid value for {path}: {msg}" if path else msg


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = _describe(errors[0]) if errors else "Invalid request"
    logger.info(f"{request.method} {request.url.path} rejected: {detail}")
    return JSONResponse(status_code=400, content={"detail": detail})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} store error: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR})
