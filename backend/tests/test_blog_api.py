"""
Bloglist Backend - Blog API Tests
==================================

What:  End-to-end tests of /api/blogs through the FastAPI app.
How:   HTTPX AsyncClient over ASGITransport against a temporary SQLite
       database that is recreated and seeded before every test.

What we test:
    ✅ GET returns JSON with an `id` on every blog
    ✅ POST adds a blog, defaults likes, rejects missing title/url
    ✅ PUT updates likes, rejects malformed ids, 404s absent ones
    ✅ DELETE answers 204 and is idempotent
    ✅ Stats endpoint, unknown endpoints, X-Request-ID header
    ✅ Store outages → 503, unexpected errors → generic 500
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bloglist.dependencies import get_blog_store
from bloglist.exceptions import StoreUnavailableError
from bloglist.main import app

NEW_BLOG = {
    "_id": "5a422b3a1b54a676234d17f9",
    "title": "Canonical string reduction",
    "author": "Edsger W. Dijkstra",
    "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
    "likes": 12,
    "__v": 0,
}


class TestGetBlogs:

    @pytest.mark.asyncio
    async def test_all_blogs_are_returned_as_json(self, test_client, initial_blogs):
        response = await test_client.get("/api/blogs")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert len(response.json()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_each_blog_has_an_id(self, test_client):
        response = await test_client.get("/api/blogs")

        assert all("id" in blog for blog in response.json())
        assert all("_id" not in blog for blog in response.json())

    @pytest.mark.asyncio
    async def test_blogs_come_back_in_insertion_order(self, test_client, initial_blogs):
        response = await test_client.get("/api/blogs")

        assert [b["title"] for b in response.json()] == [b["title"] for b in initial_blogs]

    @pytest.mark.asyncio
    async def test_get_single_blog(self, test_client, blogs_in_db):
        blog = (await blogs_in_db())[0]

        response = await test_client.get(f"/api/blogs/{blog.id}")

        assert response.status_code == 200
        assert response.json()["title"] == blog.title

    @pytest.mark.asyncio
    async def test_get_absent_blog_is_404(self, test_client):
        response = await test_client.get(f"/api/blogs/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestPostBlogs:

    @pytest.mark.asyncio
    async def test_a_valid_blog_can_be_added(self, test_client, blogs_in_db, initial_blogs):
        response = await test_client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")
        assert "id" in response.json()
        assert response.json()["id"] != NEW_BLOG["_id"]

        blogs_at_end = await blogs_in_db()
        assert len(blogs_at_end) == len(initial_blogs) + 1
        assert "Canonical string reduction" in [b.title for b in blogs_at_end]

    @pytest.mark.asyncio
    async def test_blog_without_likes_defaults_to_zero(self, test_client, blogs_in_db, initial_blogs):
        new_blog = {k: v for k, v in NEW_BLOG.items() if k != "likes"}

        response = await test_client.post("/api/blogs", json=new_blog)

        assert response.status_code == 201
        assert response.json()["likes"] == 0

        blogs_at_end = await blogs_in_db()
        assert len(blogs_at_end) == len(initial_blogs) + 1
        added = next(b for b in blogs_at_end if b.title == "Canonical string reduction")
        assert added.likes == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "url"])
    async def test_blog_with_missing_field_returns_400(
        self, test_client, blogs_in_db, initial_blogs, missing
    ):
        new_blog = {k: v for k, v in NEW_BLOG.items() if k != missing}

        response = await test_client.post("/api/blogs", json=new_blog)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert missing in body["message"]
        assert body["details"]["field"] == missing

        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_negative_likes_returns_400(self, test_client, blogs_in_db, initial_blogs):
        response = await test_client.post("/api/blogs", json={**NEW_BLOG, "likes": -3})

        assert response.status_code == 400
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_likes_too_large_for_column_returns_400(
        self, test_client, blogs_in_db, initial_blogs
    ):
        response = await test_client.post("/api/blogs", json={**NEW_BLOG, "likes": 10**20})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["details"]["field"] == "likes"
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_overlong_title_returns_400(self, test_client, blogs_in_db, initial_blogs):
        response = await test_client.post("/api/blogs", json={**NEW_BLOG, "title": "t" * 256})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "title"
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_boolean_likes_is_not_stored(self, test_client, blogs_in_db, initial_blogs):
        response = await test_client.post("/api/blogs", json={**NEW_BLOG, "likes": True})

        assert response.status_code == 422
        assert len(await blogs_in_db()) == len(initial_blogs)


class TestPutBlogs:

    @pytest.mark.asyncio
    async def test_likes_can_be_updated(self, test_client, blogs_in_db):
        blog = (await blogs_in_db())[0]

        response = await test_client.put(f"/api/blogs/{blog.id}", json={"likes": 10})

        assert response.status_code == 200
        assert response.json()["likes"] == 10
        assert response.json()["title"] == blog.title

        updated = next(b for b in await blogs_in_db() if b.id == blog.id)
        assert updated.likes == 10

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, test_client):
        response = await test_client.put("/api/blogs/1", json={"likes": 10})

        assert response.status_code == 400
        assert "malformatted id" in response.json()["message"]
        assert response.json()["error"] == "malformed_id"

    @pytest.mark.asyncio
    async def test_absent_blog_returns_404(self, test_client):
        response = await test_client.put(f"/api/blogs/{uuid4()}", json={"likes": 10})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_likes_too_large_for_column_returns_400(self, test_client, blogs_in_db):
        blog = (await blogs_in_db())[0]

        response = await test_client.put(f"/api/blogs/{blog.id}", json={"likes": 10**20})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "likes"
        unchanged = next(b for b in await blogs_in_db() if b.id == blog.id)
        assert unchanged.likes == blog.likes

    @pytest.mark.asyncio
    async def test_overlong_author_returns_400(self, test_client, blogs_in_db):
        blog = (await blogs_in_db())[0]

        response = await test_client.put(f"/api/blogs/{blog.id}", json={"author": "a" * 256})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "author"

    @pytest.mark.asyncio
    async def test_boolean_likes_returns_422(self, test_client, blogs_in_db):
        blog = (await blogs_in_db())[0]

        response = await test_client.put(f"/api/blogs/{blog.id}", json={"likes": False})

        assert response.status_code == 422
        unchanged = next(b for b in await blogs_in_db() if b.id == blog.id)
        assert unchanged.likes == blog.likes


class TestDeleteBlogs:

    @pytest.mark.asyncio
    async def test_blog_can_be_deleted(self, test_client, blogs_in_db, initial_blogs):
        blog = (await blogs_in_db())[0]

        response = await test_client.delete(f"/api/blogs/{blog.id}")

        assert response.status_code == 204
        assert response.content == b""

        blogs_at_end = await blogs_in_db()
        assert len(blogs_at_end) == len(initial_blogs) - 1
        assert blog.id not in [b.id for b in blogs_at_end]

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, test_client, blogs_in_db, initial_blogs):
        response = await test_client.delete(f"/api/blogs/{uuid4()}")

        assert response.status_code == 204
        assert len(await blogs_in_db()) == len(initial_blogs)

    @pytest.mark.asyncio
    async def test_malformed_id_returns_400(self, test_client):
        response = await test_client.delete("/api/blogs/1")

        assert response.status_code == 400
        assert "malformatted id" in response.json()["message"]


class TestStatsAndMisc:

    @pytest.mark.asyncio
    async def test_stats_over_seeded_blogs(self, test_client):
        response = await test_client.get("/api/blogs/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["total_likes"] == 12
        assert body["favorite_blog"] == {
            "title": "React patterns",
            "author": "Michael Chan",
            "likes": 7,
        }
        assert body["most_blogs"] == {"author": "Michael Chan", "blogs": 1}
        assert body["most_likes"] == {"author": "Michael Chan", "likes": 7}

    @pytest.mark.asyncio
    async def test_unknown_endpoint(self, test_client):
        response = await test_client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["error"] == "unknown_endpoint"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/blogs", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"


@pytest_asyncio.fixture
async def failing_client(mock_store):
    """
    Client whose BlogStore is mock_store; tests set its side effects.

    raise_app_exceptions=False lets the 500 response reach the client
    instead of the transport re-raising the original error.
    """
    app.dependency_overrides[get_blog_store] = lambda: mock_store
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_blog_store, None)


class TestStoreFailures:

    @pytest.mark.asyncio
    async def test_store_outage_returns_503(self, failing_client, mock_store):
        mock_store.find_all = AsyncMock(
            side_effect=StoreUnavailableError(context={"operation": "find_all"})
        )

        response = await failing_client.get("/api/blogs", headers={"X-Request-ID": "req-503"})

        assert response.status_code == 503
        body = response.json()
        assert body["error"] == "store_unavailable"
        assert body["message"] == (
            "The blog store is temporarily unavailable. Please try again later."
        )
        assert "details" not in body
        assert body["request_id"] == "req-503"

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_generic_500(self, failing_client, mock_store):
        mock_store.find_all = AsyncMock(side_effect=RuntimeError("cursor exploded"))

        response = await failing_client.get("/api/blogs", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["message"] == (
            "An unexpected error occurred. Please try again or contact support."
        )
        assert "cursor exploded" not in response.text
        assert body["request_id"] == "req-500"

    @pytest.mark.asyncio
    async def test_stats_store_outage_returns_503(self, failing_client, mock_store):
        mock_store.find_all = AsyncMock(side_effect=StoreUnavailableError())

        response = await failing_client.get("/api/blogs/stats")

        assert response.status_code == 503
        assert response.json()["error"] == "store_unavailable"
