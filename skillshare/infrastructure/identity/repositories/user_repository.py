"""Repository for User domain entities and their follow edges."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User
from skillshare.infrastructure.identity.mappers.user_mapper import UserMapper
from skillshare.models import User as UserORM
from skillshare.models import UserFollow as UserFollowORM

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Repository for User domain entities.

    A user's follow edges are stored as user_follows rows owned by the
    follower side; the counters are denormalised onto the users row.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        orm_model = self.db.get(UserORM, user_id.value)
        return self._to_domain(orm_model) if orm_model else None

    def find_by_ids(self, user_ids: set[UserId]) -> list[User]:
        """Find every existing user among user_ids."""
        if not user_ids:
            return []
        stmt = select(UserORM).where(UserORM.id.in_([u.value for u in user_ids]))
        return [self._to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The user's email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity with its following edges.

        Returns:
            Saved user entity with database-generated values
        """
        return self.save_all([user])[0]

    def save_all(self, users: list[User]) -> list[User]:
        """
        Save several users in one transaction.

        Used by follow/unfollow so both sides of the relationship and their
        counters change together.
        """
        orm_models = []
        try:
            for user in users:
                orm_model = self._upsert(user)
                self._sync_following(orm_model.id, user.following)
                orm_models.append(orm_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        for orm_model in orm_models:
            self.db.refresh(orm_model)
        logger.info(f"Saved users {[orm.id for orm in orm_models]}")
        return [self._to_domain(orm) for orm in orm_models]

    def _upsert(self, user: User) -> UserORM:
        if not user.id.is_persisted:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            self.db.flush()
            return orm_model
        orm_model = self.db.get(UserORM, user.id.value)
        if not orm_model:
            raise ValueError(f"User with id {user.id.value} not found")
        return self.mapper.to_orm(user, orm_model)

    def _sync_following(self, follower_id: int, following: set[UserId]) -> None:
        wanted = {u.value for u in following}
        current = set(
            self.db.execute(
                select(UserFollowORM.followed_id).where(UserFollowORM.follower_id == follower_id)
            ).scalars().all()
        )
        removed = current - wanted
        if removed:
            self.db.execute(
                delete(UserFollowORM).where(
                    UserFollowORM.follower_id == follower_id,
                    UserFollowORM.followed_id.in_(removed),
                )
            )
        for followed_id in sorted(wanted - current):
            self.db.add(UserFollowORM(follower_id=follower_id, followed_id=followed_id))

    def _to_domain(self, orm_model: UserORM) -> User:
        following = self.db.execute(
            select(UserFollowORM.followed_id).where(UserFollowORM.follower_id == orm_model.id)
        ).scalars().all()
        followers = self.db.execute(
            select(UserFollowORM.follower_id).where(UserFollowORM.followed_id == orm_model.id)
        ).scalars().all()
        return self.mapper.to_domain(orm_model, following, followers)
