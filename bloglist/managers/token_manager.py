"""Token manager for signing and verifying JWT bearer tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from bloglist.configs import Settings
from bloglist.schemas.auth import TokenData


def create_access_token(
    user_id: UUID,
    username: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new access token.

    Args:
        user_id: User's UUID, stored in the ``id`` claim
        username: User's username, stored in the ``sub`` claim
        settings: Settings holding the signing key and algorithm
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "id": str(user_id),
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings) -> TokenData | None:
    """
    Decode and verify an access token.

    A token that verifies but carries no ``id`` claim yields ``TokenData``
    with ``user_id`` set to None; callers must reject it themselves.

    Args:
        token: JWT token string
        settings: Settings holding the signing key and algorithm

    Returns:
        TokenData | None: Decoded token data or None if verification fails
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except JWTError:
        return None

    raw_id = payload.get("id")
    try:
        user_id = UUID(raw_id) if raw_id else None
    except (ValueError, TypeError, AttributeError):
        return None

    return TokenData(username=payload.get("sub"), user_id=user_id)
