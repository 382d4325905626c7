"""User request and response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH


class UserCreate(BaseModel):
    """
    Registration payload.

    Password length is checked by the route against the configured minimum
    so that a short password gets its own error message.
    """

    username: str = Field(
        ...,
        min_length=1,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=MAX_NAME_LENGTH,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(..., description="Password", examples=["salainen"])
    adult: bool | None = Field(
        default=None,
        description="Whether the user is an adult, true when omitted",
    )


class UserResponse(BaseModel):
    """User as returned by registration (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    adult: bool
    blogs: list[UUID] = Field(default_factory=list)


class UserBlogResponse(BaseModel):
    """Blog embedded in a user listing."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int


class UserListResponse(BaseModel):
    """User as returned by the listing, owned blogs resolved inline."""

    id: UUID
    username: str
    name: str | None = None
    adult: bool
    blogs: list[UserBlogResponse] = Field(default_factory=list)
