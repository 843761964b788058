"""
Noteful Backend — Application-Level Tests
===========================================

What we test:
    ✅ Users resource (unique username → 400)
    ✅ Health check reports database connectivity
    ✅ X-Request-ID is generated or echoed
"""

import pytest

from app.models import Article, User


class TestUsers:

    @pytest.mark.asyncio
    async def test_create_user(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"fullname": "Frodo <b>Baggins</b>", "username": "frodo", "password": "x"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["fullname"] == "Frodo &lt;b&gt;Baggins&lt;/b&gt;"
        assert body["nickname"] is None
        assert "password" not in body

    @pytest.mark.asyncio
    async def test_duplicate_username_is_400(self, test_client, seed, make_users):
        await seed(User, make_users)

        response = await test_client.post(
            "/api/users", json={"fullname": "Another Sam", "username": "sam.gamgee"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Request body violates a data constraint"}
        }

    @pytest.mark.asyncio
    async def test_missing_username_is_400(self, test_client):
        response = await test_client.post("/api/users", json={"fullname": "No Name"})
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Missing 'username' in request body"}}

    @pytest.mark.asyncio
    async def test_deleting_user_keeps_their_articles(
        self, test_client, seed, make_users, make_articles
    ):
        await seed(User, make_users)
        await seed(Article, make_articles)

        response = await test_client.delete("/api/users/1")

        assert response.status_code == 204
        article = (await test_client.get("/api/articles/1")).json()
        assert article["author"] is None


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_with_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == "1.0.0"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/api/folders")
        assert response.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_echoed_when_supplied(self, test_client):
        response = await test_client.get(
            "/api/folders/123456", headers={"X-Request-ID": "abc12345"}
        )
        assert response.status_code == 404
        assert response.headers["x-request-id"] == "abc12345"
