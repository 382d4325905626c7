"""Blog repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import RecordNotFoundError
from bloglist.models import BlogDB, UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    This class implements the repository pattern for Blog entities,
    providing CRUD operations and the owner join used by the listing.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID | None) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Blog payload; ``title`` and ``url`` must already be checked
            user_id: UUID of the owning user, or None

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=cast(str, blog.title),
            author=blog.author,
            url=cast(str, blog.url),
            likes=0 if blog.likes is None else blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def get_all_in_creation_order(self) -> list[BlogDB]:
        """
        Get every blog, oldest first.

        Returns:
            list[BlogDB]: Blogs ordered by creation time, then id
        """
        statement = select(BlogDB).order_by(BlogDB.created_at, BlogDB.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_all_with_owner(self) -> list[tuple[BlogDB, UserDB | None]]:
        """
        Get every blog together with its owner, oldest blog first.

        Returns:
            list[tuple[BlogDB, UserDB | None]]: Blogs paired with their owner,
            None for blogs without one
        """
        statement = (
            select(BlogDB, UserDB)
            .join(
                UserDB,
                cast(ColumnElement[bool], BlogDB.user_id == UserDB.id),
                isouter=True,
            )
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)
        return [(blog, user) for blog, user in result.all()]

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB:
        """
        Update blog fields present in the payload.

        A field sent as null is written as null; fields left out of the
        payload keep their value.

        Args:
            blog_id: Blog UUID
            blog_update: Fields to write

        Returns:
            BlogDB: Updated blog

        Raises:
            RecordNotFoundError: If no blog has the given id
        """
        update_data = blog_update.model_dump(exclude_unset=True)
        db_blog = await self.update_fields(blog_id, update_data)
        if db_blog is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")
        return db_blog
