"""User repository for database operations."""

from uuid import UUID

from bloglist.errors.database import DuplicateEntryError
from bloglist.models import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Besides CRUD it maintains ``UserDB.blogs``, the owner side of the
    blog ownership link.
    """

    model = UserDB

    async def create(self, user: UserCreate, password_hash: str) -> UserDB:
        """
        Create a new user in the database.

        Args:
            user: Registration payload
            password_hash: Hash of the user's password

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username is already taken
        """
        if await self.username_exists(user.username):
            raise DuplicateEntryError(detail=f"Username '{user.username}' already exists")

        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
            adult=True if user.adult is None else user.adult,
            blogs=[],
        )
        return await self._add_and_refresh(db_user)

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def username_exists(self, username: str) -> bool:
        return await self._check_exists_by_field("username", username)

    async def add_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Append a blog id to the user's owned blogs.

        Args:
            user: Owning user
            blog_id: UUID of the blog

        Returns:
            UserDB: Refreshed user
        """
        # JSON columns only track reassignment, not in-place mutation
        user.blogs = [*user.blogs, str(blog_id)]
        return await self._add_and_refresh(user)

    async def remove_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """
        Remove a blog id from the user's owned blogs.

        Args:
            user: Owning user
            blog_id: UUID of the blog

        Returns:
            UserDB: Refreshed user
        """
        user.blogs = [owned for owned in user.blogs if owned != str(blog_id)]
        return await self._add_and_refresh(user)
