from uuid import UUID

from pydantic import BaseModel, SecretStr


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: SecretStr


class Token(BaseModel):
    """Bearer token issued on login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str | None = None
    user_id: UUID | None = None
