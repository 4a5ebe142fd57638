"""Identity context schemas."""

from skillshare.infrastructure.identity.schemas.user_schemas import (
    FollowRequest,
    FollowStatusResponse,
    UserDetailsResponse,
    UserProfileResponse,
    UserProfileUpdateRequest,
    UsersListResponse,
    UserSummary,
)

__all__ = [
    "FollowRequest",
    "FollowStatusResponse",
    "UserDetailsResponse",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
    "UserSummary",
    "UsersListResponse",
]
