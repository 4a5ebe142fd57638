"""Protocol for the learning plan record store."""

from typing import Protocol

from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan


class LearningPlanRepositoryProtocol(Protocol):
    """
    Record store for whole learning plans.

    A plan is always loaded and saved together with its full subtree, and a
    save is atomic for that one record.
    """

    def find_by_id(self, plan_id: LearningPlanId) -> LearningPlan | None:
        """
        Find a plan by ID, whoever owns it.

        Ownership is checked by the caller so that "not yours" and
        "does not exist" stay distinguishable.
        """
        ...

    def find_by_owner(self, user_id: UserId) -> list[LearningPlan]:
        """Get the non-template plans owned by a user, newest first."""
        ...

    def find_templates(self) -> list[LearningPlan]:
        """Get every template plan."""
        ...

    def save(self, plan: LearningPlan) -> LearningPlan:
        """
        Save a plan and its subtree (create or update).

        Returns:
            Saved plan with database-generated values
        """
        ...

    def delete(self, plan_id: LearningPlanId) -> bool:
        """
        Delete a plan and its subtree.

        Returns:
            True if deleted, False if not found
        """
        ...
