"""Use case for following and unfollowing users."""

import structlog

from skillshare.application.identity.protocols.user_repository import UserRepositoryProtocol
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User
from skillshare.exceptions import SelfFollowError, UserNotFoundError

logger = structlog.get_logger(__name__)


class FollowUserUseCase:
    """Use case for the follow relationship between two users."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def follow(self, user_id: int, target_user_id: int) -> User:
        """
        Make user_id follow target_user_id.

        Both users are updated and saved together. Following someone already
        followed changes nothing.

        Args:
            user_id: ID of the requesting user
            target_user_id: ID of the user to follow

        Returns:
            The requesting user with updated following set and counts

        Raises:
            SelfFollowError: If the user tries to follow themselves
            UserNotFoundError: If either user does not exist
        """
        if user_id == target_user_id:
            raise SelfFollowError
        user, target = self._load_pair(user_id, target_user_id)

        if not user.follow(target):
            return user

        user, _ = self.user_repository.save_all([user, target])
        logger.info("followed_user", user_id=user_id, target_user_id=target_user_id)
        return user

    def unfollow(self, user_id: int, target_user_id: int) -> User:
        """
        Make user_id stop following target_user_id.

        Unfollowing someone not followed changes nothing.

        Raises:
            SelfFollowError: If the user names themselves
            UserNotFoundError: If either user does not exist
        """
        if user_id == target_user_id:
            raise SelfFollowError
        user, target = self._load_pair(user_id, target_user_id)

        if not user.unfollow(target):
            return user

        user, _ = self.user_repository.save_all([user, target])
        logger.info("unfollowed_user", user_id=user_id, target_user_id=target_user_id)
        return user

    def _load_pair(self, user_id: int, target_user_id: int) -> tuple[User, User]:
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        target = None
        if target_user_id > 0:
            target = self.user_repository.find_by_id(UserId(target_user_id))
        if not target:
            raise UserNotFoundError(target_user_id)
        return user, target
