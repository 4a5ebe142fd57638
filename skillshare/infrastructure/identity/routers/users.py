"""API routes for user profiles and the follow relationship."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from skillshare.application.identity.use_cases.follow_user_use_case import FollowUserUseCase
from skillshare.application.identity.use_cases.update_user_profile_use_case import (
    UpdateUserProfileUseCase,
)
from skillshare.application.identity.use_cases.user_profile_use_case import UserProfileUseCase
from skillshare.core import container
from skillshare.domain.common.exceptions import DomainError
from skillshare.exceptions import SkillshareError
from skillshare.infrastructure.common.di import inject_use_case
from skillshare.infrastructure.identity.dependencies import CurrentUser
from skillshare.infrastructure.identity.schemas import (
    FollowRequest,
    FollowStatusResponse,
    UserDetailsResponse,
    UserProfileResponse,
    UserProfileUpdateRequest,
    UsersListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/me", response_model=UserDetailsResponse)
def get_me(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse.from_entity(current_user)


@router.put("/me", response_model=UserDetailsResponse, status_code=status.HTTP_200_OK)
def update_me(
    request: UserProfileUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateUserProfileUseCase = Depends(
        inject_use_case(container.update_user_profile_use_case)
    ),
) -> UserDetailsResponse:
    """Replace the current user's first and last name."""
    try:
        user = use_case.update_profile(
            current_user.id.value, request.first_name, request.last_name
        )
        return UserDetailsResponse.from_entity(user)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("update profile", e) from e


@router.post("/follow", response_model=UserDetailsResponse, status_code=status.HTTP_200_OK)
def follow_user(
    request: FollowRequest,
    current_user: CurrentUser,
    use_case: FollowUserUseCase = Depends(inject_use_case(container.follow_user_use_case)),
) -> UserDetailsResponse:
    """
    Follow another user.

    Returns the current user with updated counters. Following someone
    already followed is accepted and changes nothing.
    """
    try:
        user = use_case.follow(current_user.id.value, request.user_id)
        return UserDetailsResponse.from_entity(user)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"follow user {request.user_id}", e) from e


@router.post("/unfollow", response_model=UserDetailsResponse, status_code=status.HTTP_200_OK)
def unfollow_user(
    request: FollowRequest,
    current_user: CurrentUser,
    use_case: FollowUserUseCase = Depends(inject_use_case(container.follow_user_use_case)),
) -> UserDetailsResponse:
    """Stop following another user."""
    try:
        user = use_case.unfollow(current_user.id.value, request.user_id)
        return UserDetailsResponse.from_entity(user)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"unfollow user {request.user_id}", e) from e


@router.get("/followers", response_model=UsersListResponse)
def get_my_followers(
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> UsersListResponse:
    """Get the users following the current user."""
    return UsersListResponse.from_entities(use_case.get_followers(current_user.id.value))


@router.get("/following", response_model=UsersListResponse)
def get_my_following(
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> UsersListResponse:
    """Get the users the current user follows."""
    return UsersListResponse.from_entities(use_case.get_following(current_user.id.value))


@router.get("/following/{user_id}", response_model=FollowStatusResponse)
def is_following(
    user_id: int,
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> FollowStatusResponse:
    """Check whether the current user follows user_id."""
    return FollowStatusResponse(is_following=use_case.is_following(current_user.id.value, user_id))


@router.get("/{user_id}", response_model=UserProfileResponse)
def get_user_profile(
    user_id: int,
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> UserProfileResponse:
    """Get another user's profile, including whether the current user follows them."""
    try:
        profile = use_case.get_profile(user_id, current_user.id.value)
        details = UserDetailsResponse.from_entity(profile.user)
        return UserProfileResponse(**details.model_dump(), is_following=profile.is_following)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get user {user_id}", e) from e


@router.get("/{user_id}/followers", response_model=UsersListResponse)
def get_user_followers(
    user_id: int,
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> UsersListResponse:
    """Get the users following user_id."""
    return UsersListResponse.from_entities(use_case.get_followers(user_id))


@router.get("/{user_id}/following", response_model=UsersListResponse)
def get_user_following(
    user_id: int,
    current_user: CurrentUser,
    use_case: UserProfileUseCase = Depends(inject_use_case(container.user_profile_use_case)),
) -> UsersListResponse:
    """Get the users user_id follows."""
    return UsersListResponse.from_entities(use_case.get_following(user_id))
