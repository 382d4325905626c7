# tests/errors/test_base.py
"""Tests for bloglist/errors/base.py module."""

from unittest.mock import MagicMock

from fastapi.responses import ORJSONResponse

from bloglist.errors import (
    AuthenticationError,
    AuthorizationError,
    BaseAppError,
    ClientInputError,
    DuplicateEntryError,
    InvalidCredentialsError,
    PasswordHashingError,
    UnexpectedError,
    create_exception_handler,
)


def make_request(client_host: str | None, path: str) -> MagicMock:
    request = MagicMock()
    if client_host is None:
        request.client = None
    else:
        request.client.host = client_host
    request.url.path = path
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns message."""
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestApiErrors:
    """Status codes and default messages of the route-level errors."""

    def test_client_input_error(self) -> None:
        error = ClientInputError("title or url missing")
        assert (error.status_code, error.detail) == (400, "title or url missing")

    def test_authentication_error(self) -> None:
        error = AuthenticationError()
        assert (error.status_code, error.detail) == (400, "token missing or invalid")

    def test_authorization_error(self) -> None:
        assert AuthorizationError().status_code == 401

    def test_invalid_credentials_error(self) -> None:
        error = InvalidCredentialsError()
        assert (error.status_code, error.detail) == (401, "invalid username or password")

    def test_unexpected_error(self) -> None:
        error = UnexpectedError()
        assert (error.status_code, error.detail) == (500, "something went wrong")

    def test_duplicate_entry_error(self) -> None:
        assert DuplicateEntryError().status_code == 409

    def test_password_hashing_error(self) -> None:
        assert PasswordHashingError().status_code == 500


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    async def test_handler_with_base_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("192.168.1.1", "/api/test")

        response = await handler(request, BaseAppError(detail="Test error", status_code=400))

        assert isinstance(response, ORJSONResponse)
        assert response.status_code == 400
        assert response.body == b'{"error":"Test error"}'
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    async def test_handler_with_generic_exception(self) -> None:
        """Test handler with generic Python exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("127.0.0.1", "/api/error")

        response = await handler(request, ValueError("Something went wrong"))

        assert response.status_code == 500
        assert response.body == b'{"error":"Internal Server Error"}'

    async def test_handler_with_no_client(self) -> None:
        """Test handler when request has no client."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request(None, "/api/test")

        _ = await handler(request, BaseAppError(detail="Error"))

        logger.warning.assert_called_once_with("Error for ip: unknown for endpoint /api/test")
