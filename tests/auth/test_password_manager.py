"""Tests for the Argon2 password hasher."""

import pytest

from bloglist.configs import Settings
from bloglist.managers.password_manager import PasswordHasher, hash_password, verify_password


@pytest.fixture
def hasher(test_settings: Settings) -> PasswordHasher:
    return PasswordHasher(test_settings)


class TestPasswordHasher:
    """Tests for the synchronous hasher."""

    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")

        assert hashed.startswith("$argon2id$")
        assert "salainen" not in hashed

    def test_hashes_are_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("salainen") != hasher.hash("salainen")

    def test_verify_matches(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")

        assert hasher.verify("salainen", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_empty_password_raises(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_blank_hash_does_not_verify(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salainen", "  ") is False

    def test_corrupted_hash_does_not_verify(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salainen", "not-a-hash") is False


async def test_async_helpers_round_trip(hasher: PasswordHasher) -> None:
    hashed = await hash_password(hasher, "salainen")

    assert await verify_password(hasher, "salainen", hashed) is True
    assert await verify_password(hasher, "wrong", hashed) is False
