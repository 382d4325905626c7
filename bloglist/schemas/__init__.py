from bloglist.schemas.auth import LoginRequest, Token, TokenData
from bloglist.schemas.blog import (
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
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserBlogResponse, UserCreate, UserListResponse, UserResponse

__all__ = [
    "AuthorBlogsResponse",
    "AuthorLikesResponse",
    "BlogCreate",
    "BlogListResponse",
    "BlogResponse",
    "BlogStatsResponse",
    "BlogSummaryResponse",
    "BlogUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "OwnerResponse",
    "Token",
    "TokenData",
    "UserBlogResponse",
    "UserCreate",
    "UserListResponse",
    "UserResponse",
]
