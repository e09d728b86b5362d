"""Request correlation and last-resort error handling for the Catalog API."""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()


def error_body(
    error_code: str,
    message: str,
    request_id: str | None = None,
    details: list | None = None,
) -> dict:
    """Build the error envelope shared by every failing response."""
    return {
        "error_code": error_code,
        "message": message,
        "details": details or [],
        "request_id": request_id,
    }


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome.

    A client-supplied ``X-Request-ID`` is reused; otherwise a UUID4 is
    generated. The ID is stored on ``request.state``, bound into the
    structlog context for the duration of the request and echoed back.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn exceptions that escaped the routers into a 500 envelope."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(
                    "INTERNAL_ERROR",
                    "An internal error occurred",
                    getattr(request.state, "request_id", None),
                ),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install catalog middleware on the app.

    The last middleware added runs first, so request IDs are bound before
    the error handler can log.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
