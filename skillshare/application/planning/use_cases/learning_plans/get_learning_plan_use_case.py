"""Use case for reading a single learning plan."""

from skillshare.application.planning.plan_access import load_visible_plan
from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.planning.entities.learning_plan import LearningPlan


class GetLearningPlanUseCase:
    """Use case for reading a single learning plan."""

    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        self.learning_plan_repository = learning_plan_repository

    def get_plan(self, plan_id: int, user_id: int) -> LearningPlan:
        """
        Get a plan visible to the user.

        Raises:
            LearningPlanNotFoundError: If the plan does not exist
            NotAuthorizedError: If the plan is another user's personal plan
        """
        return load_visible_plan(self.learning_plan_repository, plan_id, user_id)
