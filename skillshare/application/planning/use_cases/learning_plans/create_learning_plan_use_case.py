"""Use case for creating learning plans."""

import structlog

from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.outlines import PlanOutline
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder

logger = structlog.get_logger(__name__)


class CreateLearningPlanUseCase:
    """Use case for creating learning plans."""

    def __init__(
        self,
        learning_plan_repository: LearningPlanRepositoryProtocol,
        plan_tree_builder: PlanTreeBuilder,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.learning_plan_repository = learning_plan_repository
        self.plan_tree_builder = plan_tree_builder

    def create_plan(self, user_id: int, outline: PlanOutline) -> LearningPlan:
        """
        Create a personal learning plan from an outline.

        Every module, task and resource gets a fresh id, all progress starts
        at zero and the requester becomes the owner.

        Args:
            user_id: ID of the requesting user
            outline: Plan metadata and tree

        Returns:
            Created plan domain entity
        """
        plan = self.plan_tree_builder.build(UserId(user_id), outline)
        plan = self.learning_plan_repository.save(plan)

        logger.info(
            "created_learning_plan",
            plan_id=plan.id.value,
            user_id=user_id,
            module_count=plan.module_count,
            task_count=plan.task_count,
        )
        return plan
