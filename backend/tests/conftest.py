"""
Library API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── book_service: Seeded InMemoryBookService
    ├── empty_book_service: InMemoryBookService with no books
    ├── recording_logger: RecordingActivityLogger capturing activity lines
    ├── app: Fresh FastAPI app with recording_logger injected
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["ACTIVITY_LOGGER"] = "console"
os.environ["SEED_CATALOG"] = "true"

from library_api.dependencies import get_activity_logger  # noqa: E402
from library_api.main import create_app  # noqa: E402
from library_api.services.activity_logger import RecordingActivityLogger  # noqa: E402
from library_api.services.book_service import InMemoryBookService  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def book_service():
    """A catalog holding the two seed books."""
    return InMemoryBookService()


@pytest.fixture
def empty_book_service():
    """A catalog with no books at all."""
    return InMemoryBookService(books=[])


@pytest.fixture
def recording_logger():
    """
    Activity logger that keeps messages in memory.

    Usage:
        async def test_x(test_client, recording_logger):
            await test_client.get("/api/books")
            assert recording_logger.messages == ["GET all books"]
    """
    return RecordingActivityLogger()


@pytest.fixture
def app(recording_logger):
    """
    A fresh application (and so a fresh seeded catalog) per test, with the
    activity logger swapped for recording_logger through FastAPI's
    dependency overrides.
    """
    application = create_app()
    application.dependency_overrides[get_activity_logger] = lambda: recording_logger
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app (no server).
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
