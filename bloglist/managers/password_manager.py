"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing runs in a thread pool so request handlers never block the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import Settings
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    Password hashing and verification manager using the Argon2id algorithm.

    Cost parameters come from the settings so tests can run with cheap hashes.
    """

    def __init__(self, settings: Settings) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=settings.ARGON2_MEMORY_COST,
            argon2__time_cost=settings.ARGON2_TIME_COST,
            argon2__parallelism=settings.ARGON2_PARALLELISM,
        )
        logger.info("PasswordHasher initialized with Argon2id")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Returns:
            bool: True if password matches, False otherwise
        """
        if not hashed_password or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


async def hash_password(hasher: PasswordHasher, password: str) -> str:
    """
    Hash a password off the event loop.

    Example:
        >>> hashed = await hash_password(hasher, "my_password")
    """
    return await get_running_loop().run_in_executor(executor, hasher.hash, password)


async def verify_password(hasher: PasswordHasher, password: str, hashed_password: str) -> bool:
    """
    Verify a password off the event loop.

    Example:
        >>> is_valid = await verify_password(hasher, "my_password", hashed_password)
    """
    return await get_running_loop().run_in_executor(
        executor,
        hasher.verify,
        password,
        hashed_password,
    )
