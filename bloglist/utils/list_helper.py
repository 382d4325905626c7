"""
Aggregations over an already-fetched list of blogs.

Every function is pure: it reads ``title``, ``author`` and ``likes`` from the
given records and never touches the database. The per-author aggregations use
a single left-to-right pass with a running maximum that only moves when it is
strictly exceeded, so on a tie the author who reached the winning value first
is returned, even if another author ends with the same total.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class BlogLike(Protocol):
    """Anything exposing the fields the aggregations read."""

    @property
    def title(self) -> str: ...

    @property
    def author(self) -> str | None: ...

    @property
    def likes(self) -> int: ...


@dataclass(frozen=True)
class BlogSummary:
    """Formatted form of a blog: title, author and likes only."""

    title: str
    author: str | None
    likes: int

    @classmethod
    def from_blog(cls, blog: BlogLike) -> "BlogSummary":
        return cls(title=blog.title, author=blog.author, likes=blog.likes)


@dataclass(frozen=True)
class AuthorBlogs:
    """Author with the number of blogs written."""

    author: str | None
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    """Author with the likes summed over all of their blogs."""

    author: str | None
    likes: int


def dummy(blogs: Sequence[BlogLike]) -> int:
    """Sanity check that always returns 1."""
    return 1


def total_likes(blogs: Sequence[BlogLike]) -> int:
    """
    Sum the likes of all blogs.

    Args:
        blogs: Blogs to aggregate

    Returns:
        int: Total likes, 0 for an empty sequence
    """
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Sequence[BlogLike]) -> BlogSummary:
    """
    Find the blog with the most likes.

    The fold is seeded with the first blog and only replaced by a blog with
    strictly more likes, so the earliest of equally liked blogs wins.

    Args:
        blogs: Blogs to search, must not be empty

    Returns:
        BlogSummary: Formatted form of the most liked blog

    Raises:
        ValueError: If ``blogs`` is empty
    """
    if not blogs:
        mssg = "favorite_blog requires at least one blog"
        raise ValueError(mssg)

    favorite = BlogSummary.from_blog(blogs[0])
    for blog in blogs[1:]:
        if favorite.likes < blog.likes:
            favorite = BlogSummary.from_blog(blog)
    return favorite


def most_blogs(blogs: Sequence[BlogLike]) -> AuthorBlogs | None:
    """
    Find the author with the most blogs.

    Args:
        blogs: Blogs to group by author

    Returns:
        AuthorBlogs | None: First author to reach the highest count, None if
        there are no blogs
    """
    counts: dict[str | None, int] = {}
    leader: AuthorBlogs | None = None

    for blog in blogs:
        counts[blog.author] = counts.get(blog.author, 0) + 1
        if leader is None or leader.blogs < counts[blog.author]:
            leader = AuthorBlogs(author=blog.author, blogs=counts[blog.author])

    return leader


def most_likes(blogs: Sequence[BlogLike]) -> AuthorLikes | None:
    """
    Find the author whose blogs have the most likes in total.

    Args:
        blogs: Blogs to group by author

    Returns:
        AuthorLikes | None: First author to reach the highest sum, None if
        there are no blogs
    """
    sums: dict[str | None, int] = {}
    leader: AuthorLikes | None = None

    for blog in blogs:
        sums[blog.author] = sums.get(blog.author, 0) + blog.likes
        if leader is None or leader.likes < sums[blog.author]:
            leader = AuthorLikes(author=blog.author, likes=sums[blog.author])

    return leader
