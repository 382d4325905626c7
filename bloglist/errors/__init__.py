from bloglist.errors.api import (
    AuthenticationError,
    AuthorizationError,
    ClientInputError,
    InvalidCredentialsError,
    UnexpectedError,
    api_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import validation_exception_handler

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "BaseAppError",
    "ClientInputError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UnexpectedError",
    "api_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
