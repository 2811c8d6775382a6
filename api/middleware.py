"""
Consolidated middleware for the Daily Diet API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError

logger = logging.getLogger("dailydiet.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    elif isinstance(obj, Exception):
        return str(obj)
    return obj


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def error_body(error: dict) -> dict:
    return {"success": False, "error": error, "timestamp": _utcnow_iso()}


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome and duration"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        route = f"method={request.method} path={request.url.path}"
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                f"request_failed request_id={request_id} {route} "
                f"elapsed={time.perf_counter() - started:.4f}s"
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            f"request_completed request_id={request_id} {route} "
            f"status={response.status_code} elapsed={elapsed:.4f}s"
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(
            {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": make_serializable(exc.errors()),
            }
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body({"code": f"HTTP_{exc.status_code}", "message": exc.detail}),
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Handle errors raised by services and dependencies (400/401/404)"""
    logger.warning(f"{exc.__class__.__name__} on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(make_serializable(exc.to_dict())),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
            }
        ),
    )
