# bloglist/routes/login.py

"""Login route issuing bearer tokens."""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import HasherDep, SettingsDep, UserRepoDep
from bloglist.errors import InvalidCredentialsError
from bloglist.managers import create_access_token, verify_password
from bloglist.monitoring import get_logger
from bloglist.schemas import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔐 Auth"])

logger = get_logger(__name__)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"error": "invalid username or password"}},
            },
        },
    },
    operation_id="auth_login",
)
async def login(
    credentials: Annotated[
        LoginRequest,
        Body(examples=[{"username": "mluukkai", "password": "salainen"}]),
    ],
    repo: UserRepoDep,
    hasher: HasherDep,
    settings: SettingsDep,
) -> Token:
    """
    Login with username and password.

    Parameters
    ----------
    credentials : LoginRequest
        Username and password.
    repo : UserRepository
        Repository dependency.
    hasher : PasswordHasher
        Password hasher dependency.
    settings : Settings
        Settings holding the signing key.

    Returns
    -------
    Token
        Bearer token with the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the user does not exist or the password does not match.
    """
    user = await repo.get_by_username(credentials.username)
    password = credentials.password.get_secret_value()
    if user is None or not await verify_password(hasher, password, user.password_hash):
        logger.warning("Failed login attempt", username=credentials.username)
        raise InvalidCredentialsError

    token = create_access_token(user.id, user.username, settings)
    return Token(token=token, username=user.username, name=user.name)
