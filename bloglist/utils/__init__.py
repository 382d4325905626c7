from bloglist.utils.helpers import get_summary, host, parse_id, today_str
from bloglist.utils.list_helper import (
    AuthorBlogs,
    AuthorLikes,
    BlogSummary,
    dummy,
    favorite_blog,
    most_blogs,
    most_likes,
    total_likes,
)

__all__ = [
    "AuthorBlogs",
    "AuthorLikes",
    "BlogSummary",
    "dummy",
    "favorite_blog",
    "get_summary",
    "host",
    "most_blogs",
    "most_likes",
    "parse_id",
    "today_str",
    "total_likes",
]
