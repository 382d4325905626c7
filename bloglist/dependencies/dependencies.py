# bloglist/dependencies/dependencies.py

"""Application dependencies: settings, sessions, repositories and the bearer check."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.configs import Settings
from bloglist.db import Database
from bloglist.errors import AuthenticationError
from bloglist.managers import PasswordHasher, decode_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository

logger = get_logger(__name__)

# auto_error is off so a missing token becomes our own client error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_session(
    db: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    The session commits when the request succeeds and rolls back when any
    exception escapes the route.

    Yields:
        AsyncSession: Database session
    """
    async with db.transaction() as session:
        yield session


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]
HasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


async def get_token_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    settings: SettingsDep,
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Resolve the bearer token to the user it was issued for.

    Parameters
    ----------
    token : str | None
        Bearer token from the ``Authorization`` header, None when absent.
    settings : Settings
        Settings holding the signing key.
    user_repo : UserRepository
        User repository dependency.

    Returns
    -------
    UserDB
        The user named by the token's ``id`` claim.

    Raises
    ------
    AuthenticationError
        If the token is missing, fails verification, has no ``id`` claim,
        or names a user that does not exist.
    """
    if not token:
        raise AuthenticationError

    token_data = decode_access_token(token, settings)
    if token_data is None:
        raise AuthenticationError

    if token_data.user_id is None:
        raise AuthenticationError

    user = await user_repo.get_by_id(token_data.user_id)
    if user is None:
        logger.warning("Token names an unknown user", user_id=str(token_data.user_id))
        raise AuthenticationError

    return user


TokenUserDep = Annotated[UserDB, Depends(get_token_user)]
