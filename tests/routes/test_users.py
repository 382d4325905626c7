# tests/routes/test_users.py
"""Tests for the /api/users routes."""

from collections.abc import Awaitable, Callable
from unittest.mock import patch

from fastapi import FastAPI
from httpx import AsyncClient

from bloglist.managers import PasswordHasher
from bloglist.models import UserDB
from bloglist.repositories import UserRepository

UsersInDb = Callable[[], Awaitable[list[UserDB]]]


class TestCreateUser:
    """Tests for POST /api/users."""

    async def test_creation_succeeds_with_fresh_username(
        self,
        client: AsyncClient,
        root_user: dict,
        users_in_db: UsersInDb,
    ) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["blogs"] == []
        assert "password" not in body
        assert "password_hash" not in body

        usernames = [user.username for user in await users_in_db()]
        assert usernames.count("mluukkai") == 1
        assert len(usernames) == 2

    async def test_password_is_stored_hashed(
        self,
        client: AsyncClient,
        root_user: dict,
        users_in_db: UsersInDb,
        app: FastAPI,
    ) -> None:
        users = await users_in_db()
        stored = users[0].password_hash

        assert stored != "sekret"
        assert stored.startswith("$argon2")
        assert app.state.password_hasher.verify("sekret", stored)

    async def test_adult_defaults_to_true(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "adult", "password": "secret"},
        )

        assert response.json()["adult"] is True

    async def test_adult_can_be_false(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "minor", "password": "secret", "adult": False},
        )

        assert response.status_code == 200
        assert response.json()["adult"] is False

    async def test_duplicate_username_is_rejected(
        self,
        client: AsyncClient,
        root_user: dict,
        users_in_db: UsersInDb,
    ) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "root", "name": "Superuser", "password": "salainen"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "username must be unique"}
        assert len(await users_in_db()) == 1

    async def test_short_password_is_rejected(
        self,
        client: AsyncClient,
        users_in_db: UsersInDb,
    ) -> None:
        response = await client.post(
            "/api/users",
            json={"username": "shorty", "password": "a"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "password too short"}
        assert await users_in_db() == []

    async def test_missing_username_fails_validation(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={"password": "salainen"})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid request body"

    async def test_storage_failure_is_unexpected(
        self,
        client: AsyncClient,
        users_in_db: UsersInDb,
    ) -> None:
        with patch.object(UserRepository, "create", side_effect=RuntimeError("boom")):
            response = await client.post(
                "/api/users",
                json={"username": "broken", "password": "salainen"},
            )

        assert response.status_code == 500
        assert response.json() == {"error": "something went wrong"}
        assert await users_in_db() == []

    async def test_hashing_failure_is_unexpected(self, client: AsyncClient) -> None:
        with patch.object(PasswordHasher, "hash", side_effect=ValueError("bad")):
            response = await client.post(
                "/api/users",
                json={"username": "broken", "password": "salainen"},
            )

        assert response.status_code == 500


class TestListUsers:
    """Tests for GET /api/users."""

    async def test_users_are_listed_with_their_blogs(
        self,
        client: AsyncClient,
        root_user: dict,
        initial_blogs: list[dict],
    ) -> None:
        response = await client.get("/api/users")

        assert response.status_code == 200
        users = response.json()
        assert len(users) == 1
        assert users[0]["username"] == "root"
        assert [blog["id"] for blog in users[0]["blogs"]] == [b["id"] for b in initial_blogs]
        assert set(users[0]["blogs"][0]) == {"id", "title", "author", "url", "likes"}

    async def test_deleted_blog_disappears_from_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        initial_blogs: list[dict],
    ) -> None:
        await client.delete(f"/api/blogs/{initial_blogs[0]['id']}", headers=auth_headers)

        response = await client.get("/api/users")

        assert [blog["id"] for blog in response.json()[0]["blogs"]] == [initial_blogs[1]["id"]]
