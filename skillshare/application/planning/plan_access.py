"""Loading plans with the existence and ownership checks every use case shares."""

from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.exceptions import LearningPlanNotFoundError, NotAuthorizedError


def load_plan(repository: LearningPlanRepositoryProtocol, plan_id: int) -> LearningPlan:
    """Load a plan or raise LearningPlanNotFoundError. Ids below 1 never exist."""
    plan = repository.find_by_id(LearningPlanId(plan_id)) if plan_id > 0 else None
    if not plan:
        raise LearningPlanNotFoundError(plan_id)
    return plan


def load_visible_plan(
    repository: LearningPlanRepositoryProtocol, plan_id: int, user_id: int
) -> LearningPlan:
    """Load a plan the user may read: a template, or one they own."""
    plan = load_plan(repository, plan_id)
    if not plan.is_visible_to(UserId(user_id)):
        raise NotAuthorizedError("Not authorized to access this learning plan")
    return plan


def load_owned_plan(
    repository: LearningPlanRepositoryProtocol, plan_id: int, user_id: int, action: str
) -> LearningPlan:
    """Load a plan the user owns; action names the attempted operation in the error."""
    plan = load_plan(repository, plan_id)
    if not plan.belongs_to_user(UserId(user_id)):
        raise NotAuthorizedError(f"Not authorized to {action} this learning plan")
    return plan
