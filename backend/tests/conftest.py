"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_store: AsyncMock standing in for a ResourceStore (no DB needed)
    ├── database: Empty tables in a temporary SQLite file
    ├── seed: Inserts raw rows directly, bypassing the API (and sanitization)
    ├── test_client: HTTPX AsyncClient talking to the FastAPI app
    └── make_* data fixtures mirroring the seed data of each resource
"""

import os
import tempfile
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# Override settings for testing BEFORE any app imports
_test_dir = tempfile.mkdtemp(prefix="noteful_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/noteful_test.db"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from httpx import AsyncClient, ASGITransport  # noqa: E402

from app.database import async_session_factory, create_tables, drop_tables  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Store & Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock resource store.

    Usage:
        mock_store.get_by_id.return_value = SimpleNamespace(id=1, ...)
        await ResourceController(ARTICLES, mock_store).get_resource(1)
    """
    store = AsyncMock()
    store.list = AsyncMock(return_value=[])
    store.get_by_id = AsyncMock(return_value=None)
    store.insert = AsyncMock()
    store.update = AsyncMock(return_value=1)
    store.delete = AsyncMock(return_value=1)
    return store


@pytest_asyncio.fixture
async def database():
    """Fresh, empty tables for each test (the equivalent of TRUNCATE ... RESTART IDENTITY)."""
    await drop_tables()
    await create_tables()
    yield
    await drop_tables()


@pytest_asyncio.fixture
async def seed(database):
    """
    Insert rows straight into a table.

    Rows skip the controller, so raw markup stays raw. This is how
    legacy, unsanitized data is simulated.
    """
    async def _seed(model, rows):
        async with async_session_factory() as session:
            session.add_all([model(**row) for row in rows])
            await session.commit()

    return _seed


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/articles")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Seed Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_users():
    return [
        {"id": 1, "fullname": "Sam Gamgee", "username": "sam.gamgee", "nickname": "Sam",
         "date_created": datetime(2029, 1, 22, 16, 28, 32, 615000)},
        {"id": 2, "fullname": "Peregrin Took", "username": "peregrin.took", "nickname": "Pippin",
         "date_created": datetime(2029, 1, 22, 16, 28, 32, 615000)},
    ]


@pytest.fixture
def make_articles():
    return [
        {"id": 1, "title": "First test post!", "style": "How-to",
         "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
         "date_published": datetime(2029, 1, 22, 16, 28, 32, 615000), "author": 1},
        {"id": 2, "title": "Second test post!", "style": "News",
         "content": "Natus consequuntur deserunt commodi, nobis qui inventore corrupti.",
         "date_published": datetime(2100, 5, 22, 16, 28, 32, 615000), "author": 2},
        {"id": 3, "title": "Third test post!", "style": "Listicle",
         "content": "Possimus, voluptate? Necessitatibus est officiis, porro fugit.",
         "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000), "author": None},
        {"id": 4, "title": "Fourth test post!", "style": "Story",
         "content": "Earum molestiae accusamus veniam consectetur tempora.",
         "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000), "author": 1},
    ]


@pytest.fixture
def make_folders():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


@pytest.fixture
def make_notes():
    return [
        {"id": 1, "title": "Dogs", "content": "Dogs are loyal.", "folder_id": 1,
         "modified": datetime(2019, 1, 3, 0, 0, 0)},
        {"id": 2, "title": "Cats", "content": "Cats are aloof.", "folder_id": 2,
         "modified": datetime(2018, 8, 15, 12, 30, 0)},
        {"id": 3, "title": "Pigs", "content": "Pigs are clever.", "folder_id": 1,
         "modified": datetime(2018, 3, 1, 9, 15, 0)},
    ]


@pytest.fixture
def malicious_text():
    """Raw markup and the neutralized form the API must return."""
    return {
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "expected_title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "expected_content": (
            'Bad image &lt;img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);"&gt;. But not &lt;strong&gt;all&lt;/strong&gt; bad.'
        ),
    }


def as_json(record):
    """Render a seed row the way the API serializes it."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in record.items()
    }


@pytest.fixture
def to_json():
    return as_json
