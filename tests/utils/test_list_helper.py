# tests/utils/test_list_helper.py
"""Tests for bloglist/utils/list_helper.py module."""

from dataclasses import dataclass

import pytest

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


@dataclass
class Blog:
    title: str
    author: str | None
    likes: int
    url: str = "https://example.com/"


BLOGS = [
    Blog("React patterns", "Michael Chan", 7),
    Blog("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5),
    Blog("Canonical string reduction", "Edsger W. Dijkstra", 12),
    Blog("First class tests", "Robert C. Martin", 10),
    Blog("TDD harms architecture", "Robert C. Martin", 0),
    Blog("Type wars", "Robert C. Martin", 2),
]

ONE_BLOG = [Blog("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5)]


def test_dummy_returns_one() -> None:
    assert dummy([]) == 1
    assert dummy(BLOGS) == 1


class TestTotalLikes:
    """Tests for total_likes."""

    def test_of_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_of_one_blog_equals_its_likes(self) -> None:
        assert total_likes(ONE_BLOG) == 5

    def test_of_bigger_list_is_calculated_right(self) -> None:
        assert total_likes(BLOGS) == 36


class TestFavoriteBlog:
    """Tests for favorite_blog."""

    def test_of_one_blog_is_that_blog(self) -> None:
        assert favorite_blog(ONE_BLOG) == BlogSummary(
            title="Go To Statement Considered Harmful",
            author="Edsger W. Dijkstra",
            likes=5,
        )

    def test_of_bigger_list_is_most_liked(self) -> None:
        assert favorite_blog(BLOGS) == BlogSummary(
            title="Canonical string reduction",
            author="Edsger W. Dijkstra",
            likes=12,
        )

    def test_result_has_no_url(self) -> None:
        assert not hasattr(favorite_blog(BLOGS), "url")

    def test_tie_keeps_earliest(self) -> None:
        blogs = [Blog("first", "A", 3), Blog("second", "B", 3)]
        assert favorite_blog(blogs).title == "first"

    def test_of_empty_list_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one blog"):
            favorite_blog([])


class TestMostBlogs:
    """Tests for most_blogs."""

    def test_of_empty_list_is_none(self) -> None:
        assert most_blogs([]) is None

    def test_of_one_blog(self) -> None:
        assert most_blogs(ONE_BLOG) == AuthorBlogs(author="Edsger W. Dijkstra", blogs=1)

    def test_of_bigger_list(self) -> None:
        assert most_blogs(BLOGS) == AuthorBlogs(author="Robert C. Martin", blogs=3)

    def test_tie_goes_to_author_reaching_count_first(self) -> None:
        blogs = [Blog("1", "A", 0), Blog("2", "B", 0), Blog("3", "B", 0), Blog("4", "A", 0)]
        assert most_blogs(blogs) == AuthorBlogs(author="B", blogs=2)

    def test_single_blogs_go_to_first_author(self) -> None:
        blogs = [Blog("1", "A", 0), Blog("2", "B", 0)]
        assert most_blogs(blogs) == AuthorBlogs(author="A", blogs=1)


class TestMostLikes:
    """Tests for most_likes."""

    def test_of_empty_list_is_none(self) -> None:
        assert most_likes([]) is None

    def test_of_one_blog(self) -> None:
        assert most_likes(ONE_BLOG) == AuthorLikes(author="Edsger W. Dijkstra", likes=5)

    def test_of_bigger_list(self) -> None:
        assert most_likes(BLOGS) == AuthorLikes(author="Edsger W. Dijkstra", likes=17)

    def test_tie_goes_to_author_reaching_sum_first(self) -> None:
        blogs = [Blog("1", "A", 5), Blog("2", "B", 10), Blog("3", "A", 5)]
        assert most_likes(blogs) == AuthorLikes(author="B", likes=10)

    def test_zero_likes_keep_first_author(self) -> None:
        blogs = [Blog("1", "A", 0), Blog("2", "B", 0)]
        assert most_likes(blogs) == AuthorLikes(author="A", likes=0)
