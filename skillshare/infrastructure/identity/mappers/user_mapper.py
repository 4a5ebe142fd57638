"""Mapper for User ORM ↔ Domain conversion."""

from collections.abc import Iterable

from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.identity.entities.user import User
from skillshare.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(
        self,
        orm_model: UserORM,
        following_ids: Iterable[int] = (),
        follower_ids: Iterable[int] = (),
    ) -> User:
        """Convert ORM model plus its follow edges to a domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            first_name=orm_model.first_name,
            last_name=orm_model.last_name,
            following={UserId(i) for i in following_ids},
            followers={UserId(i) for i in follower_ids},
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model. Follow edges are written by the repository."""
        if orm_model is None:
            orm_model = UserORM()
            if domain_entity.id.is_persisted:
                orm_model.id = domain_entity.id.value

        orm_model.email = domain_entity.email
        orm_model.first_name = domain_entity.first_name
        orm_model.last_name = domain_entity.last_name
        orm_model.following_count = domain_entity.following_count
        orm_model.follower_count = domain_entity.follower_count
        return orm_model
