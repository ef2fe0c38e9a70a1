"""Error envelope shared by every endpoint.

All failures are rendered as ``{"success": false, "errors": [...]}`` where
each entry has at least a ``msg`` key.
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(HTTPException):
    def __init__(self, status_code: int, msg: str, **extra: Any) -> None:
        super().__init__(status_code=status_code, detail=[{**extra, "msg": msg}])


def internal_error() -> ApiError:
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def error_body(errors: list[dict]) -> dict:
    return {"success": False, "errors": errors}


def _as_error_list(detail: Any) -> list[dict]:
    if isinstance(detail, list):
        return detail
    if isinstance(detail, dict):
        return [detail]
    return [{"msg": str(detail)}]


def _field_error(error: dict) -> dict:
    location = error.get("loc") or ()
    return {
        "type": "field",
        "msg": error.get("msg", "Invalid value"),
        "path": ".".join(str(part) for part in location[1:]),
        "location": location[0] if location else "body",
    }


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(_as_error_list(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body([_field_error(error) for error in exc.errors()]),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body([{"msg": INTERNAL_ERROR_MESSAGE}]),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
