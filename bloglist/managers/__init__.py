from bloglist.managers.password_manager import PasswordHasher, hash_password, verify_password
from bloglist.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
]
