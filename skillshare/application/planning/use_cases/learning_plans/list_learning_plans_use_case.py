"""Use case for listing the requester's learning plans."""

from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan, PlanStatus
from skillshare.exceptions import ValidationError


class ListLearningPlansUseCase:
    """Use case for listing the requester's own (non-template) plans."""

    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        self.learning_plan_repository = learning_plan_repository

    def list_plans(self, user_id: int) -> list[LearningPlan]:
        """Get all non-template plans owned by the user."""
        return self.learning_plan_repository.find_by_owner(UserId(user_id))

    def list_by_category(self, user_id: int, category: str) -> list[LearningPlan]:
        """Get the user's plans in a category (case-insensitive match)."""
        wanted = category.strip().casefold()
        return [
            plan
            for plan in self.list_plans(user_id)
            if plan.category and plan.category.strip().casefold() == wanted
        ]

    def list_by_time_range(
        self, user_id: int, min_hours: int, max_hours: int
    ) -> list[LearningPlan]:
        """
        Get the user's plans whose estimated hours lie within [min_hours, max_hours].

        Raises:
            ValidationError: If min_hours is greater than max_hours
        """
        if min_hours > max_hours:
            raise ValidationError("min_hours cannot be greater than max_hours")
        return [
            plan
            for plan in self.list_plans(user_id)
            if min_hours <= plan.estimated_hours <= max_hours
        ]

    def list_by_status(self, user_id: int, status: str) -> list[LearningPlan]:
        """
        Get the user's plans in a derived progress status.

        Raises:
            ValidationError: If status is not a known PlanStatus
        """
        try:
            wanted = PlanStatus(status.strip().upper())
        except ValueError:
            allowed = ", ".join(s.value for s in PlanStatus)
            msg = f"Unknown status '{status}', expected one of: {allowed}"
            raise ValidationError(msg) from None
        return [plan for plan in self.list_plans(user_id) if plan.status is wanted]
