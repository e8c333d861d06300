"""
Pytest configuration and shared fixtures.
"""

from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from jobqueue.api.main import create_app
from jobqueue.config import Settings
from jobqueue.constants import CONSUMER_ID_HEADER
from jobqueue.queue import InMemoryJobQueue, PriorityJobQueue


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        log_level="DEBUG",
        log_format="console",
        otel_enabled=False,
    )


@pytest.fixture
def memory_queue() -> InMemoryJobQueue:
    """Create an empty single-priority queue."""
    return InMemoryJobQueue(name="test")


@pytest.fixture
def priority_queue() -> PriorityJobQueue:
    """Create an empty priority-routed queue."""
    return PriorityJobQueue()


@pytest.fixture
def app(priority_queue: PriorityJobQueue) -> FastAPI:
    """Create a FastAPI app serving the test queue."""
    return create_app(job_queue=priority_queue)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def consumer_id() -> str:
    """Generate a consumer identity."""
    return f"consumer-{uuid4().hex[:8]}"


@pytest.fixture
def consumer_headers(consumer_id: str) -> dict[str, str]:
    """Create consumer identification headers."""
    return {CONSUMER_ID_HEADER: consumer_id}
