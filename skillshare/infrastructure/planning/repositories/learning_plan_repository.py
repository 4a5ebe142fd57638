"""Repository for LearningPlan aggregates."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.infrastructure.planning.mappers.learning_plan_mapper import LearningPlanMapper
from skillshare.models import LearningPlan as LearningPlanORM


class LearningPlanRepository:
    """Repository for LearningPlan aggregates, always loaded and saved with their subtree."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearningPlanMapper()

    def find_by_id(self, plan_id: LearningPlanId) -> LearningPlan | None:
        """
        Find a plan by ID regardless of owner.

        Args:
            plan_id: The plan ID

        Returns:
            LearningPlan entity if found, None otherwise
        """
        orm_model = self.db.get(LearningPlanORM, plan_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner(self, user_id: UserId) -> list[LearningPlan]:
        """
        Get the non-template plans of a user.

        Returns:
            List of plan entities ordered by created_at DESC
        """
        stmt = (
            select(LearningPlanORM)
            .where(
                LearningPlanORM.user_id == user_id.value,
                LearningPlanORM.is_template.is_(False),
            )
            .order_by(LearningPlanORM.created_at.desc(), LearningPlanORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_templates(self) -> list[LearningPlan]:
        """Get all template plans ordered by id."""
        stmt = (
            select(LearningPlanORM)
            .where(LearningPlanORM.is_template.is_(True))
            .order_by(LearningPlanORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, plan: LearningPlan) -> LearningPlan:
        """
        Save a plan and its subtree (create or update) in one commit.

        Args:
            plan: The plan entity to save

        Returns:
            Saved plan entity with database-generated values
        """
        if not plan.id.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(plan)
            self.db.add(orm_model)
        else:
            # Update existing
            orm_model = self.db.get(LearningPlanORM, plan.id.value)
            if not orm_model:
                raise ValueError(f"Learning plan {plan.id.value} not found")
            self.mapper.to_orm(plan, orm_model)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, plan_id: LearningPlanId) -> bool:
        """
        Delete a plan together with its modules, tasks and resources.

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(LearningPlanORM, plan_id.value)
        if not orm_model:
            return False
        try:
            self.db.delete(orm_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return True
