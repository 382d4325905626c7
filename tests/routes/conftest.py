# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from uuid import UUID

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bloglist.configs import Settings
from bloglist.db import Database
from bloglist.main import create_app
from bloglist.managers import create_access_token
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository

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

ROOT_PASSWORD = "sekret"


@pytest.fixture
def settings(tmp_path: Path, test_settings: Settings) -> Settings:
    """Settings pointing at a database file private to the test."""
    return test_settings.model_copy(
        update={"DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"},
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI]:
    """Application with its tables created (ASGITransport skips the lifespan)."""
    application = create_app(settings)
    await application.state.db.create_all()
    yield application
    await application.state.db.dispose()


@pytest.fixture
def db(app: FastAPI) -> Database:
    return app.state.db


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


@pytest.fixture
async def root_user(client: AsyncClient) -> dict:
    """Register the user most tests act as."""
    response = await client.post(
        "/api/users",
        json={"username": "root", "name": "Superuser", "password": ROOT_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture
def root_token(root_user: dict, settings: Settings) -> str:
    return create_access_token(UUID(root_user["id"]), root_user["username"], settings)


@pytest.fixture
def auth_headers(root_token: str) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {root_token}"}


@pytest.fixture
async def initial_blogs(client: AsyncClient, auth_headers: dict[str, str]) -> list[dict]:
    """Store the initial blogs, owned by the root user."""
    created = []
    for blog in INITIAL_BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=auth_headers)
        assert response.status_code == 201
        created.append(response.json())
    return created


BlogsInDb = Callable[[], Awaitable[list[BlogDB]]]
UsersInDb = Callable[[], Awaitable[list[UserDB]]]


@pytest.fixture
def blogs_in_db(db: Database) -> BlogsInDb:
    """Read every stored blog through a fresh session."""

    async def _blogs() -> list[BlogDB]:
        async with db.transaction() as session:
            return await BlogRepository(session).get_all()

    return _blogs


@pytest.fixture
def users_in_db(db: Database) -> UsersInDb:
    """Read every stored user through a fresh session."""

    async def _users() -> list[UserDB]:
        async with db.transaction() as session:
            return await UserRepository(session).get_all()

    return _users
