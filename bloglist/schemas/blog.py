"""
Blog request and response models.

Request bodies keep ``title`` and ``url`` optional so the routes can answer
a missing field with their own client error instead of a generic validation
failure.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH


class OwnerResponse(BaseModel):
    """Owner information embedded in blog listings (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogCreate(BaseModel):
    """Blog creation payload; ``title`` and ``url`` are checked by the route."""

    title: str | None = Field(
        default=None,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title (required)",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        max_length=MAX_AUTHOR_LENGTH,
        description="Blog author",
        examples=["Michael Chan"],
    )
    url: str | None = Field(
        default=None,
        max_length=MAX_URL_LENGTH,
        description="Blog URL (required)",
        examples=["https://reactpatterns.com/"],
    )
    likes: int | None = Field(
        default=None,
        ge=0,
        description="Like count, 0 when omitted",
        examples=[7],
    )


class BlogUpdate(BaseModel):
    """Blog update payload; only the fields present in the body are written."""

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=MAX_AUTHOR_LENGTH)
    url: str | None = Field(default=None, min_length=1, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)


class BlogResponse(BaseModel):
    """Blog as returned by create and update, owner as a raw id."""

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: UUID | None = None


class BlogListResponse(BaseModel):
    """Blog as returned by the listing, owner resolved inline."""

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: OwnerResponse | None = None


class BlogSummaryResponse(BaseModel):
    """Formatted form of a single blog."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    author: str | None = None
    likes: int


class AuthorBlogsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None = None
    blogs: int


class AuthorLikesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str | None = None
    likes: int


class BlogStatsResponse(BaseModel):
    """Aggregations over every stored blog."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes")
    favorite_blog: BlogSummaryResponse | None = Field(default=None, alias="favoriteBlog")
    most_blogs: AuthorBlogsResponse | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikesResponse | None = Field(default=None, alias="mostLikes")
