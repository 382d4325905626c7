# bloglist/dependencies/__init__.py

from bloglist.dependencies.dependencies import (
    BlogRepoDep,
    HasherDep,
    SessionDep,
    SettingsDep,
    TokenUserDep,
    UserRepoDep,
    get_blog_repository,
    get_database,
    get_password_hasher,
    get_session,
    get_settings,
    get_token_user,
    get_user_repository,
)

__all__ = [
    "BlogRepoDep",
    "HasherDep",
    "SessionDep",
    "SettingsDep",
    "TokenUserDep",
    "UserRepoDep",
    "get_blog_repository",
    "get_database",
    "get_password_hasher",
    "get_session",
    "get_settings",
    "get_token_user",
    "get_user_repository",
]
