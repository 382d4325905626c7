# bloglist/routes/user.py

"""
User Routes.

Summary
-------
Endpoints include:
  - Register user
  - List users (owned blogs resolved inline)

Users are never updated or deleted through the API.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse

from bloglist.dependencies import BlogRepoDep, HasherDep, SettingsDep, UserRepoDep
from bloglist.errors import ClientInputError, DuplicateEntryError, UnexpectedError
from bloglist.managers import hash_password
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import UserBlogResponse, UserCreate, UserListResponse, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = get_logger(__name__)


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`, blogs as raw ids.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        Validated response model, without the password hash.
    """
    return UserResponse.model_validate(db_user)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Register user",
    description="Create a user. The password is stored only as an Argon2 hash.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "adult": True,
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"error": "username must be unique"}},
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {
                    "username": "mluukkai",
                    "name": "Matti Luukkainen",
                    "password": "salainen",
                },
            ],
        ),
    ],
    repo: UserRepoDep,
    hasher: HasherDep,
    settings: SettingsDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    user : UserCreate
        Registration payload.
    repo : UserRepository
        Repository dependency.
    hasher : PasswordHasher
        Password hasher dependency.
    settings : Settings
        Settings holding the minimum password length.

    Returns
    -------
    UserResponse
        Created user.

    Raises
    ------
    ClientInputError
        If the password is too short or the username is taken.
    UnexpectedError
        If hashing or storing the user fails.
    """
    password = user.password.get_secret_value()
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise ClientInputError("password too short")

    try:
        password_hash = await hash_password(hasher, password)
        db_user = await repo.create(user, password_hash)
        await repo.commit()
    except DuplicateEntryError as e:
        raise ClientInputError("username must be unique") from e
    except Exception as e:
        logger.exception("Failed to create user", username=user.username)
        raise UnexpectedError from e

    logger.info("User registered", user_id=str(db_user.id))
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserListResponse],
    summary="List users",
    description="Return every user with the blogs they own.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "123e4567-e89b-12d3-a456-426614174000",
                            "username": "mluukkai",
                            "name": "Matti Luukkainen",
                            "adult": True,
                            "blogs": [
                                {
                                    "id": "550e8400-e29b-41d4-a716-446655440000",
                                    "title": "React patterns",
                                    "author": "Michael Chan",
                                    "url": "https://reactpatterns.com/",
                                    "likes": 7,
                                },
                            ],
                        },
                    ],
                },
            },
        },
    },
    operation_id="users_list",
)
async def get_users(repo: UserRepoDep, blog_repo: BlogRepoDep) -> list[UserListResponse]:
    """
    List all users.

    Parameters
    ----------
    repo : UserRepository
        Repository dependency.
    blog_repo : BlogRepository
        Repository used to resolve owned blogs.

    Returns
    -------
    list[UserListResponse]
        Users with their blogs in the order they were created.
    """
    users = await repo.get_all()
    owned_ids = [UUID(blog_id) for user in users for blog_id in user.blogs]
    blogs = {blog.id: blog for blog in await blog_repo.get_many(owned_ids)}

    return [
        UserListResponse(
            id=user.id,
            username=user.username,
            name=user.name,
            adult=user.adult,
            blogs=[
                UserBlogResponse.model_validate(blogs[UUID(blog_id)])
                for blog_id in user.blogs
                if UUID(blog_id) in blogs
            ],
        )
        for user in users
    ]
