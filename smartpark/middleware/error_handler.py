"""
Exception translation.

Every failure leaves the API as ``{"message": ...}`` with the status of
its error class. Store and unexpected failures are logged with their
traceback and reported as a generic 500.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from smartpark.errors import SmartParkError

SERVER_ERROR = "Server error"


def create_error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def describe_validation_error(exc: RequestValidationError) -> str:
    """One-line message naming the first offending field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    if not loc:
        return "Invalid request body"
    return f"Invalid value for {'.'.join(loc)}: {first.get('msg', 'invalid')}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with FastAPI app."""

    @app.exception_handler(SmartParkError)
    async def smartpark_exception_handler(request: Request, exc: SmartParkError):
        if exc.status_code >= 500:
            logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
        else:
            logger.debug("{} {} -> {}: {}", request.method, request.url.path, exc.status_code, exc.message)
        return create_error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.warning("Validation error on {} {}: {}", request.method, request.url.path, message)
        return create_error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return create_error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.opt(exception=exc).error("Database error on {} {}", request.method, request.url.path)
        return create_error_response(500, SERVER_ERROR)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(
            "Unhandled {} on {} {}", type(exc).__name__, request.method, request.url.path
        )
        return create_error_response(500, SERVER_ERROR)
