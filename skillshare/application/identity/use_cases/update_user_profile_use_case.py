"""Use case for editing the requester's own profile."""

import structlog

from skillshare.application.identity.protocols.user_repository import UserRepositoryProtocol
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User
from skillshare.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class UpdateUserProfileUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def update_profile(
        self, user_id: int, first_name: str | None, last_name: str | None
    ) -> User:
        """
        Replace the user's first and last name.

        Args:
            user_id: ID of the user editing their profile
            first_name: New first name, None or blank to clear it
            last_name: New last name, None or blank to clear it

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user is not found
            ValidationError: If a name is too long
        """
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id > 0 else None
        if not user:
            raise UserNotFoundError(user_id)

        user.update_name(first_name, last_name)
        user = self.user_repository.save(user)

        logger.info("user_profile_updated", user_id=user_id)
        return user
