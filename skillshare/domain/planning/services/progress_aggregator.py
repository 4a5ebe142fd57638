"""Domain service for completed-hours rollups."""

from collections.abc import Iterable

from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.entities.learning_task import LearningTask

MINUTES_PER_HOUR = 60


class ProgressAggregator:
    """
    Stateless domain service computing completed hours bottom-up.

    Every method is a pure function of the current tree: nothing is
    accumulated between calls, so recomputing twice gives the same result.
    After a task changes, the owning module must be recomputed before the
    plan.
    """

    @staticmethod
    def completed_minutes(tasks: Iterable[LearningTask]) -> int:
        """Sum of estimated minutes over completed tasks."""
        return sum(task.estimated_minutes for task in tasks if task.is_completed)

    @staticmethod
    def recompute_module(module: LearningModule) -> int:
        """
        Refresh a module's completed hours from its tasks.

        Minutes are converted to hours by truncation (150 minutes -> 2 hours).
        An empty module has 0 completed hours.

        Returns:
            The new completed hours of the module
        """
        minutes = ProgressAggregator.completed_minutes(module.tasks)
        module.completed_hours = minutes // MINUTES_PER_HOUR
        return module.completed_hours

    @staticmethod
    def recompute_plan(plan: LearningPlan) -> int:
        """
        Refresh a plan's completed hours from its modules' completed hours.

        Module values are taken as they are; call recompute_module first for
        any module whose tasks changed.

        Returns:
            The new completed hours of the plan
        """
        plan.completed_hours = sum(module.completed_hours for module in plan.modules)
        return plan.completed_hours

    @staticmethod
    def recompute_tree(plan: LearningPlan) -> int:
        """Recompute every module, then the plan."""
        for module in plan.modules:
            ProgressAggregator.recompute_module(module)
        return ProgressAggregator.recompute_plan(plan)
