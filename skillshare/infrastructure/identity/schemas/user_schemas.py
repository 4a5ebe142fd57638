"""Pydantic schemas for user API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from skillshare.domain.identity.entities.user import User


class UserDetailsResponse(BaseModel):
    """Schema for a user with follow counters."""

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    display_name: str
    follower_count: int
    following_count: int
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDetailsResponse":
        return cls(
            id=user.id.value,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            display_name=user.display_name,
            follower_count=user.follower_count,
            following_count=user.following_count,
            created_at=user.created_at,
        )


class UserProfileResponse(UserDetailsResponse):
    """Schema for another user's profile as seen by the requester."""

    is_following: bool = Field(..., description="Whether the requester follows this user")


class UserSummary(BaseModel):
    """Schema for an entry of a followers/following list."""

    id: int
    display_name: str


class UsersListResponse(BaseModel):
    """Schema for list of users response."""

    users: list[UserSummary] = Field(..., description="List of users")

    @classmethod
    def from_entities(cls, users: list[User]) -> "UsersListResponse":
        return cls(users=[UserSummary(id=u.id.value, display_name=u.display_name) for u in users])


class UserProfileUpdateRequest(BaseModel):
    """Schema for replacing the current user's name. Omitted or blank parts are cleared."""

    first_name: str | None = Field(None, max_length=100, description="First name")
    last_name: str | None = Field(None, max_length=100, description="Last name")


class FollowRequest(BaseModel):
    """Schema naming the user to follow or unfollow."""

    user_id: int = Field(..., gt=0, description="ID of the target user")


class FollowStatusResponse(BaseModel):
    is_following: bool
