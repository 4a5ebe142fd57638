"""Use case for editing learning plan metadata."""

import structlog

from skillshare.application.planning.plan_access import load_owned_plan
from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.application.planning.use_cases.dtos.plan_dtos import PlanDetails
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.exceptions import TemplateMutationError

logger = structlog.get_logger(__name__)


class UpdateLearningPlanUseCase:
    """Use case for editing learning plan metadata."""

    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        self.learning_plan_repository = learning_plan_repository

    def update_plan(self, plan_id: int, user_id: int, details: PlanDetails) -> LearningPlan:
        """
        Replace title, description, category and estimated hours of a plan.

        The module tree and all progress are left as they are.

        Raises:
            LearningPlanNotFoundError: If the plan does not exist
            NotAuthorizedError: If the user does not own the plan
            TemplateMutationError: If the plan is a template
        """
        plan = load_owned_plan(self.learning_plan_repository, plan_id, user_id, "update")
        if plan.is_template:
            raise TemplateMutationError(plan_id)

        plan.update_details(
            title=details.title,
            description=details.description,
            category=details.category,
            estimated_hours=details.estimated_hours,
        )
        plan = self.learning_plan_repository.save(plan)

        logger.info("updated_learning_plan", plan_id=plan_id, user_id=user_id)
        return plan
