"""
Per-request access logging middleware.
"""

import logging
import time
from collections.abc import Callable
from uuid import uuid4

from fastapi import Request

from jobqueue.constants import REQUEST_ID_HEADER
from jobqueue.observability.logging import bind_context, clear_context

logger = logging.getLogger(__name__)


def create_request_logging_middleware() -> Callable:
    """
    Create access logging middleware for FastAPI.

    Each request gets a request ID, taken from the ``Request-Id`` header when
    the client sends one. The ID is bound to the structlog context so every
    record written while handling the request carries it, and it is echoed
    back on the response.

    Returns:
        The middleware function.
    """

    async def request_logging_middleware(request: Request, call_next: Callable):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        clear_context()
        bind_context(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 3),
                },
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request handled",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "size": int(response.headers.get("content-length", 0)),
                "duration_ms": round((time.perf_counter() - started) * 1000, 3),
                "ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent"),
            },
        )
        return response

    return request_logging_middleware
