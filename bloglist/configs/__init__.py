from bloglist.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    TOKEN_ERROR_MESSAGE,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "TOKEN_ERROR_MESSAGE",
    "Settings",
    "settings",
]
