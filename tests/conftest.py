# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before bloglist is imported anywhere: the module-level settings
# and app are built from the environment.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./bloglist-test.db"
os.environ["CREATE_TABLES"] = "false"
os.environ["SECRET_KEY"] = "bloglist-test-secret"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"

import pytest  # noqa: E402

from bloglist.configs import Settings  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    """Settings built from the test environment."""
    return Settings()
