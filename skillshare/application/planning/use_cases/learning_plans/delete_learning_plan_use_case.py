"""Use case for deleting learning plans."""

import structlog

from skillshare.application.planning.plan_access import load_owned_plan
from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import LearningPlanId
from skillshare.exceptions import LearningPlanNotFoundError, TemplateMutationError

logger = structlog.get_logger(__name__)


class DeleteLearningPlanUseCase:
    """Use case for deleting a plan together with its whole subtree."""

    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        self.learning_plan_repository = learning_plan_repository

    def delete_plan(self, plan_id: int, user_id: int) -> None:
        """
        Delete a plan owned by the user.

        Raises:
            LearningPlanNotFoundError: If the plan does not exist
            NotAuthorizedError: If the user does not own the plan
            TemplateMutationError: If the plan is a template
        """
        plan = load_owned_plan(self.learning_plan_repository, plan_id, user_id, "delete")
        if plan.is_template:
            raise TemplateMutationError(plan_id)

        if not self.learning_plan_repository.delete(LearningPlanId(plan_id)):
            raise LearningPlanNotFoundError(plan_id)

        logger.info("deleted_learning_plan", plan_id=plan_id, user_id=user_id)
