from typing import Protocol

from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_ids(self, user_ids: set[UserId]) -> list[User]: ...

    def find_by_email(self, email: str) -> User | None: ...

    def save(self, user: User) -> User: ...

    def save_all(self, users: list[User]) -> list[User]: ...
