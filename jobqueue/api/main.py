"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from jobqueue import __version__
from jobqueue.api.request_logging import create_request_logging_middleware
from jobqueue.api.routes import health_router, jobs_router
from jobqueue.config import get_settings
from jobqueue.observability.logging import setup_logging
from jobqueue.observability.tracing import instrument_fastapi, setup_tracing
from jobqueue.queue import PriorityJobQueue

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    setup_logging()
    setup_tracing()

    logger.info("Application started")

    yield

    pending = app.state.job_queue.pending_counts()
    logger.info("Application shutdown", extra={"pending": pending})


def create_app(job_queue: PriorityJobQueue | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        job_queue: Queue to serve. A fresh in-memory queue is created if
            omitted.

    Returns:
        FastAPI: The configured application instance.
    """
    app = FastAPI(
        title="Job Dispatch API",
        description="In-memory job intake and dispatch with two priority levels",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.job_queue = job_queue or PriorityJobQueue()

    app.add_middleware(
        BaseHTTPMiddleware,
        dispatch=create_request_logging_middleware(),
    )

    app.include_router(health_router)
    app.include_router(jobs_router)

    instrument_fastapi(app)

    return app


def run() -> None:
    """Run the API server."""
    settings = get_settings()
    app = create_app()

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    run()
