from .follow_user_use_case import FollowUserUseCase
from .update_user_profile_use_case import UpdateUserProfileUseCase
from .user_profile_use_case import UserProfile, UserProfileUseCase

__all__ = ["FollowUserUseCase", "UpdateUserProfileUseCase", "UserProfile", "UserProfileUseCase"]
