# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (owner resolved inline)
  - Create blog (bearer token required)
  - Blog statistics
  - Update blog
  - Delete blog (bearer token required, owner only)

Dependencies
------------
  - `BlogOpsDeps`: Bundles repositories and the token user for authenticated operations.

Creating and deleting a blog write both the blog row and the owner's list of
blog ids. Both writes share the request session and are committed together.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogRepoDep, TokenUserDep, UserRepoDep
from bloglist.errors import (
    AuthorizationError,
    ClientInputError,
    RecordNotFoundError,
    UnexpectedError,
)
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.schemas import (
    AuthorBlogsResponse,
    AuthorLikesResponse,
    BlogCreate,
    BlogListResponse,
    BlogResponse,
    BlogStatsResponse,
    BlogSummaryResponse,
    BlogUpdate,
    OwnerResponse,
)
from bloglist.utils import favorite_blog, most_blogs, most_likes, parse_id, total_likes

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

MISSING_FIELDS_ERROR = "title or url missing"
ID_ERROR = "id is not correct"
NON_NULLABLE_FIELDS = frozenset({"title", "url", "likes"})


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`, owner as a raw id.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=db_blog.user_id,
    )


def db_blog_to_list_response(db_blog: BlogDB, owner: UserDB | None) -> BlogListResponse:
    """
    Convert a `BlogDB` instance and its owner to `BlogListResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owning user, None for blogs stored without one.

    Returns
    -------
    BlogListResponse
        Validated list response model.
    """
    return BlogListResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=OwnerResponse.model_validate(owner) if owner else None,
    )


@dataclass(frozen=True)
class BlogOpsDeps:
    """Dependencies for authenticated blog operations."""

    repo: BlogRepoDep
    user_repo: UserRepoDep
    current_user: TokenUserDep


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogListResponse],
    summary="List blogs",
    description="Return every blog with its owner's id, username and name.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "title": "React patterns",
                            "author": "Michael Chan",
                            "url": "https://reactpatterns.com/",
                            "likes": 7,
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogListResponse]:
    """
    List all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogListResponse]
        Every stored blog, no filtering or pagination.
    """
    rows = await repo.get_all_with_owner()
    return [db_blog_to_list_response(blog, owner) for blog, owner in rows]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the user named in the bearer token.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "title": "React patterns",
                        "author": "Michael Chan",
                        "url": "https://reactpatterns.com/",
                        "likes": 0,
                        "user": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": MISSING_FIELDS_ERROR}}},
        },
        500: {
            "description": "Unexpected failure",
            "content": {"application/json": {"example": {"error": "something went wrong"}}},
        },
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    deps: Annotated[BlogOpsDeps, Depends()],
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    deps : BlogOpsDeps
        Operation dependencies (repositories + token user).

    Returns
    -------
    BlogResponse
        Created blog, owner as a raw id.

    Raises
    ------
    ClientInputError
        If title or url is missing.
    UnexpectedError
        If storing the blog or updating the owner fails.
    """
    if blog.title is None or blog.url is None:
        raise ClientInputError(MISSING_FIELDS_ERROR)

    try:
        db_blog = await deps.repo.create(blog, user_id=deps.current_user.id)
        await deps.user_repo.add_blog(deps.current_user, db_blog.id)
        await deps.repo.commit()
    except Exception as e:
        logger.exception("Failed to create blog", user_id=str(deps.current_user.id))
        raise UnexpectedError from e

    logger.info("Blog created", blog_id=str(db_blog.id), user_id=str(deps.current_user.id))
    return db_blog_to_response(db_blog)


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatsResponse,
    summary="Blog statistics",
    description="Total likes, favourite blog, most prolific author and most liked author.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalLikes": 36,
                        "favoriteBlog": {
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "likes": 12,
                        },
                        "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
                        "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_stats",
)
async def get_blog_stats(repo: BlogRepoDep) -> BlogStatsResponse:
    """
    Aggregate every stored blog.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogStatsResponse
        Aggregations; everything but ``totalLikes`` is null without blogs.
    """
    blogs = await repo.get_all_in_creation_order()
    if not blogs:
        return BlogStatsResponse(total_likes=0)

    top_author = most_blogs(blogs)
    top_liked = most_likes(blogs)
    return BlogStatsResponse(
        total_likes=total_likes(blogs),
        favorite_blog=BlogSummaryResponse.model_validate(favorite_blog(blogs)),
        most_blogs=AuthorBlogsResponse.model_validate(top_author) if top_author else None,
        most_likes=AuthorLikesResponse.model_validate(top_liked) if top_liked else None,
    )


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Write title, author, url and likes of a blog. No token is required.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "title": "React patterns",
                        "author": "Michael Chan",
                        "url": "https://reactpatterns.com/",
                        "likes": 8,
                        "user": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": ID_ERROR}}},
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog_update: Annotated[
        BlogUpdate,
        Body(examples=[{"likes": 8}]),
    ],
    repo: BlogRepoDep,
) -> BlogResponse:
    """
    Update blog fields.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Fields to write; omitted fields keep their value.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Updated blog.

    Raises
    ------
    ClientInputError
        If the id is malformed or unknown, a required field is sent as
        null, or the write fails.
    """
    parsed_id = parse_id(blog_id)
    if parsed_id is None:
        raise ClientInputError(ID_ERROR)

    for field in sorted(NON_NULLABLE_FIELDS & blog_update.model_fields_set):
        if getattr(blog_update, field) is None:
            raise ClientInputError(f"{field} cannot be null")

    try:
        db_blog = await repo.update(parsed_id, blog_update)
        await repo.commit()
    except RecordNotFoundError as e:
        raise ClientInputError(ID_ERROR) from e
    except Exception as e:
        logger.exception("Failed to update blog", blog_id=blog_id)
        raise ClientInputError(ID_ERROR) from e

    return db_blog_to_response(db_blog)


@router.delete(
    "/{blog_id}",
    response_class=Response,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only the user who created it may delete it.",
    responses={
        204: {"description": "No Content"},
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
        },
        401: {
            "description": "Not the owner",
            "content": {
                "application/json": {"example": {"error": "not allowed to remove this blog"}},
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    deps: Annotated[BlogOpsDeps, Depends()],
) -> Response:
    """
    Delete blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    deps : BlogOpsDeps
        Operation dependencies (repositories + token user).

    Returns
    -------
    Response
        Empty 204 response.

    Raises
    ------
    ClientInputError
        If the id is malformed or unknown, or the removal fails.
    AuthorizationError
        If the token user does not own the blog.
    """
    parsed_id = parse_id(blog_id)
    if parsed_id is None:
        raise ClientInputError(ID_ERROR)

    existing = await deps.repo.get_by_id(parsed_id)
    if existing is None:
        raise ClientInputError(ID_ERROR)

    if existing.user_id != deps.current_user.id:
        raise AuthorizationError("not allowed to remove this blog")

    try:
        await deps.user_repo.remove_blog(deps.current_user, existing.id)
        await deps.repo.delete(existing.id)
        await deps.repo.commit()
    except Exception as e:
        logger.exception("Failed to delete blog", blog_id=blog_id)
        raise ClientInputError("blog could not be removed") from e

    logger.info("Blog deleted", blog_id=blog_id, user_id=str(deps.current_user.id))
    return Response(status_code=HTTP_204_NO_CONTENT)
