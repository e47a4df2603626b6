# taskboard/exception_handlers.py
import logging
from datetime import datetime
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST

from taskboard.exceptions import TaskboardError
from taskboard.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def build_error_response(
    request: Request,
    status_code: int,
    message: str,
    error: str,
    validation_errors: Optional[Dict[str, str]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error=error,
        status=status_code,
        path=request.url.path,
        timestamp=datetime.utcnow(),
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> JSONResponse:
    logger.warning(f"{exc.error} on {request.method} {request.url.path}: {exc.message}")
    return build_error_response(request, exc.status_code, exc.message, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        error = HTTPStatus(exc.status_code).phrase
    except ValueError:
        error = "Error"
    return build_error_response(
        request,
        exc.status_code,
        str(exc.detail),
        error,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    validation_errors = {}
    for err in exc.errors():
        # Drop the "body"/"query"/"path" prefix from the location
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "request"
        validation_errors[field] = err.get("msg", "Invalid value")
    return build_error_response(
        request,
        HTTP_400_BAD_REQUEST,
        "Validation failed",
        "Validation Failed",
        validation_errors=validation_errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return build_error_response(request, 500, "An unexpected error occurred", "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
