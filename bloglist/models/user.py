"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, Boolean, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from bloglist.configs.settings import MAX_NAME_LENGTH, MAX_USERNAME_LENGTH


class UserDB(SQLModel, table=True):
    """
    User database model.

    ``blogs`` holds the ids of the blogs the user owns, in creation order.
    It is kept in step with ``BlogDB.user_id`` by the repositories, not
    derived from it.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )
    username: str = Field(
        sa_column=Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    name: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_NAME_LENGTH)),
        description="Display name",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )
    adult: bool = Field(
        sa_column=Column(Boolean, nullable=False),
        description="Whether the user is an adult",
    )
    blogs: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB, "postgresql"), nullable=False),
        description="Ids of the blogs owned by the user",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC).replace(microsecond=0),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "adult": True,
                "blogs": [],
            },
        },
    )
