"""JSON error envelope: every error response is {"error": ..., "details"?: ...}."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.logger import setup_logger

logger = setup_logger(__name__)


def error_body(error: str, details=None) -> dict:
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        content = error_body("Method not allowed")
    elif isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")
    # raw inputs are not echoed back; they may hold NaN, which JSON cannot encode
    details = [
        {"loc": error["loc"], "msg": error["msg"], "type": error["type"]} for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content=error_body("Invalid request", jsonable_encoder(details)))


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


def server_error(e: Exception) -> dict:
    """Detail payload for an unexpected failure."""
    return error_body("Server error", str(e))
