# tests/routes/test_login.py
"""Tests for POST /api/login."""

from httpx import AsyncClient

from bloglist.configs import Settings
from bloglist.managers import decode_access_token


class TestLogin:
    """Tests for the login route."""

    async def test_login_returns_token(
        self,
        client: AsyncClient,
        root_user: dict,
        settings: Settings,
    ) -> None:
        response = await client.post(
            "/api/login",
            json={"username": "root", "password": "sekret"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"

        token_data = decode_access_token(body["token"], settings)
        assert token_data is not None
        assert str(token_data.user_id) == root_user["id"]

    async def test_issued_token_can_create_blog(
        self,
        client: AsyncClient,
        root_user: dict,
    ) -> None:
        login = await client.post(
            "/api/login",
            json={"username": "root", "password": "sekret"},
        )
        token = login.json()["token"]

        response = await client.post(
            "/api/blogs",
            json={"title": "Logged in", "url": "https://example.com/"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201
        assert response.json()["user"] == root_user["id"]

    async def test_wrong_password_is_rejected(
        self,
        client: AsyncClient,
        root_user: dict,
    ) -> None:
        response = await client.post(
            "/api/login",
            json={"username": "root", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "invalid username or password"}

    async def test_unknown_user_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/login",
            json={"username": "nobody", "password": "sekret"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "invalid username or password"}
