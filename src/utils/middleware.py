import time
import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.models.errors import UserError

logger = logging.getLogger(__name__)

async def request_timing_middleware(request: Request, call_next):
    """Middleware to log request timing information"""
    start_time = time.time()

    response = await call_next(request)

    # Calculate request duration
    duration = time.time() - start_time
    response.headers["X-Process-Time"] = str(duration)

    logger.info(f"{request.method} {request.url.path} completed in {duration:.3f}s with status {response.status_code}")

    return response

async def user_error_handler(request: Request, exc: UserError):
    """Return service failures as plain text"""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

def _describe_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"

async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Return undecodable requests (bad JSON, missing fields) as plain text"""
    message = "Invalid request: " + "; ".join(_describe_validation_error(e) for e in exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {message}")
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

async def unhandled_error_handler(request: Request, exc: Exception):
    """Catch-all, never leaks internal details"""
    logger.exception(f"Unhandled exception on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )

def register_middleware(app: FastAPI):
    """Register middleware and exception handlers with the FastAPI application"""
    app.middleware("http")(request_timing_middleware)
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
