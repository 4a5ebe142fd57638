"""User entity: plan owner and node of the follow graph."""

from dataclasses import dataclass, field
from datetime import datetime

from skillshare.domain.common.entity import Entity
from skillshare.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from skillshare.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    User of the platform.

    Business Rules:
    - Email must be non-empty and at most MAX_EMAIL_LENGTH characters
    - Name parts are at most MAX_NAME_LENGTH characters; blank parts are None
    - A user cannot follow themselves
    - following_count and follower_count always equal the sizes of the
      following and followers sets
    """

    id: UserId
    email: str
    first_name: str | None = None
    last_name: str | None = None
    following: set[UserId] = field(default_factory=set)
    followers: set[UserId] = field(default_factory=set)
    following_count: int = field(init=False, default=0)
    follower_count: int = field(init=False, default=0)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants and derive the counters."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        self._refresh_counts()

    def _refresh_counts(self) -> None:
        self.following_count = len(self.following)
        self.follower_count = len(self.followers)

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.email

    def update_name(self, first_name: str | None, last_name: str | None) -> None:
        """
        Replace both name parts. Blank parts are stored as None.

        Raises:
            ValidationError: If a part exceeds MAX_NAME_LENGTH characters
        """
        first_name = _clean_name(first_name, "first_name")
        last_name = _clean_name(last_name, "last_name")
        self.first_name = first_name
        self.last_name = last_name

    def is_following(self, user_id: UserId) -> bool:
        return user_id in self.following

    def is_followed_by(self, user_id: UserId) -> bool:
        return user_id in self.followers

    def follow(self, target: "User") -> bool:
        """
        Follow another user, updating both sides of the relationship.

        Returns:
            True if the relationship was created, False if it already existed

        Raises:
            BusinessRuleViolationError: If the user tries to follow themselves
        """
        if target.id == self.id:
            raise BusinessRuleViolationError("no_self_follow", "Users cannot follow themselves")
        if self.is_following(target.id):
            return False
        self.following.add(target.id)
        target.followers.add(self.id)
        self._refresh_counts()
        target._refresh_counts()
        return True

    def unfollow(self, target: "User") -> bool:
        """
        Stop following another user, updating both sides of the relationship.

        Returns:
            True if a relationship was removed, False if there was none
        """
        if not self.is_following(target.id):
            return False
        self.following.discard(target.id)
        target.followers.discard(self.id)
        self._refresh_counts()
        target._refresh_counts()
        return True

    @classmethod
    def create(
        cls, email: str, first_name: str | None = None, last_name: str | None = None
    ) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(
            id=UserId.unsaved(),
            email=email.strip(),
            first_name=first_name,
            last_name=last_name,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        first_name: str | None,
        last_name: str | None,
        following: set[UserId],
        followers: set[UserId],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            following=following,
            followers=followers,
            created_at=created_at,
            updated_at=updated_at,
        )


def _clean_name(value: str | None, field_name: str) -> str | None:
    if value is None or not value.strip():
        return None
    value = value.strip()
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters", field=field_name, value=value
        )
    return value
