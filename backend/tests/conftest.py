"""
Bloglist Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Plain data:
    ├── initial_blogs: the two blogs seeded before every API test
    ├── make_blog: factory for unsaved Blog ORM objects
    └── mock_store: BlogStore double (UUID ids, AsyncMock CRUD)

    Database-backed (temporary SQLite file via aiosqlite):
    ├── database: fresh schema + seeded blogs; engine disposed afterwards
    ├── blogs_in_db: async callable returning every stored Blog
    └── test_client: HTTPX AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

# Must be set before any bloglist import: the engine is built at import time
_test_dir = tempfile.mkdtemp(prefix="bloglist_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select

from bloglist.database import Base, async_session_factory, engine
from bloglist.exceptions import MalformedIdError
from bloglist.models.blog import Blog


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


# ══════════════════════════════════════════════════════════════════════════
# Plain Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def initial_blogs():
    return [dict(blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def make_blog():
    """
    Factory for Blog ORM objects that were never added to a session.

    Usage:
        blog = make_blog(likes=3)
    """
    def _make(**overrides) -> Blog:
        fields = {
            "id": uuid4(),
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
            "likes": 12,
        }
        fields.update(overrides)
        return Blog(**fields)

    return _make


def _parse_uuid(raw_id):
    try:
        return UUID(str(raw_id))
    except ValueError:
        raise MalformedIdError(raw_id=raw_id)


@pytest.fixture
def mock_store():
    """
    A BlogStore double with the SQL store's id rules.

    Usage:
        mock_store.find_by_id.return_value = make_blog()
    """
    store = MagicMock()
    store.parse_id = MagicMock(side_effect=_parse_uuid)
    store.find_all = AsyncMock(return_value=[])
    store.find_by_id = AsyncMock(return_value=None)
    store.insert = AsyncMock()
    store.replace = AsyncMock(return_value=None)
    store.delete = AsyncMock(return_value=None)
    return store


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(initial_blogs) -> AsyncGenerator[None, None]:
    """
    Recreates the schema and seeds INITIAL_BLOGS, one by one so insertion
    order is list order.

    The engine is disposed on teardown: each test runs on its own event loop
    and pooled aiosqlite connections must not outlive it.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        for fields in initial_blogs:
            session.add(Blog(**fields))
            await session.flush()
        await session.commit()

    yield

    await engine.dispose()


@pytest.fixture
def blogs_in_db(database):
    """Async callable returning every stored Blog, read through a fresh session."""
    async def _blogs_in_db():
        async with async_session_factory() as session:
            result = await session.execute(select(Blog).order_by(Blog.created_at))
            return list(result.scalars().all())

    return _blogs_in_db


@pytest_asyncio.fixture
async def test_client(database) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/blogs")
    """
    from bloglist.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
