"""Use case for reading user profiles and follow lists."""

from dataclasses import dataclass

from skillshare.application.identity.protocols.user_repository import UserRepositoryProtocol
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User
from skillshare.exceptions import UserNotFoundError


@dataclass(frozen=True)
class UserProfile:
    """A user as seen by the requester."""

    user: User
    is_following: bool


class UserProfileUseCase:
    """Use case for reading user profiles and follow lists."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id > 0 else None
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def get_profile(self, user_id: int, viewer_id: int) -> UserProfile:
        """Get a user together with whether the viewer follows them."""
        user = self.get_user(user_id)
        return UserProfile(user=user, is_following=user.is_followed_by(UserId(viewer_id)))

    def is_following(self, user_id: int, target_user_id: int) -> bool:
        user = self.get_user(user_id)
        return target_user_id > 0 and user.is_following(UserId(target_user_id))

    def get_followers(self, user_id: int) -> list[User]:
        """Get the users following user_id, ordered by id."""
        return self._sorted(self.user_repository.find_by_ids(self.get_user(user_id).followers))

    def get_following(self, user_id: int) -> list[User]:
        """Get the users user_id follows, ordered by id."""
        return self._sorted(self.user_repository.find_by_ids(self.get_user(user_id).following))

    @staticmethod
    def _sorted(users: list[User]) -> list[User]:
        return sorted(users, key=lambda u: u.id.value)
