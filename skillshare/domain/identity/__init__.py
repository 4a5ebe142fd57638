"""Identity domain layer."""

from skillshare.domain.identity.entities.user import User

__all__ = ["User"]
