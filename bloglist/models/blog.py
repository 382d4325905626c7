"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Integer, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from bloglist.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    ``user_id`` references the owning user and stays null for blogs stored
    without an authenticated owner.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(String(MAX_AUTHOR_LENGTH), index=True),
        description="Blog author",
    )
    url: str = Field(
        sa_column=Column(String(MAX_URL_LENGTH), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Like count",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )
