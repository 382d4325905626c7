"""Errors raised by the route layer and mapped to HTTP responses."""

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from bloglist.configs import DEFAULT_ERROR_MESSAGE, TOKEN_ERROR_MESSAGE
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class ClientInputError(BaseAppError):
    """Raised when the request is missing data or carries a malformed id."""

    def __init__(self, detail: str = "bad request") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class AuthenticationError(BaseAppError):
    """Raised when the bearer token is absent or does not verify."""

    def __init__(self, detail: str = TOKEN_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class AuthorizationError(BaseAppError):
    """Raised when an authenticated user acts on a record they do not own."""

    def __init__(self, detail: str = "not allowed") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(BaseAppError):
    """Raised when login credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class UnexpectedError(BaseAppError):
    """Raised when an operation fails for a reason the client cannot fix."""

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


api_exception_handler = create_exception_handler(logger)
