"""Use case for marking a task of a learning plan as completed."""

from datetime import UTC, datetime
from uuid import UUID

import structlog

from skillshare.application.planning.plan_access import load_owned_plan
from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import ModuleId, TaskId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.services.progress_aggregator import ProgressAggregator
from skillshare.exceptions import (
    LearningModuleNotFoundError,
    LearningTaskNotFoundError,
    TemplateMutationError,
)

logger = structlog.get_logger(__name__)


class UpdatePlanProgressUseCase:
    """Use case for recording task completion and rolling it up the plan."""

    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.learning_plan_repository = learning_plan_repository

    def complete_task(
        self, plan_id: int, module_id: UUID, task_id: UUID, user_id: int
    ) -> LearningPlan:
        """
        Mark a task as completed and recompute module and plan hours.

        Checks run in order: plan exists, requester owns it, plan is not a
        template, module exists in the plan, task exists in the module.
        Marking an already completed task again changes nothing and the
        original completion time is kept.

        Args:
            plan_id: ID of the plan
            module_id: ID of the module within the plan
            task_id: ID of the task within the module
            user_id: ID of the requesting user

        Returns:
            The plan with updated progress

        Raises:
            LearningPlanNotFoundError: If the plan does not exist
            NotAuthorizedError: If the user does not own the plan
            TemplateMutationError: If the plan is a template
            LearningModuleNotFoundError: If the module is not in the plan
            LearningTaskNotFoundError: If the task is not in the module
        """
        plan = load_owned_plan(self.learning_plan_repository, plan_id, user_id, "update")
        if plan.is_template:
            raise TemplateMutationError(plan_id)

        module = plan.find_module(ModuleId(module_id))
        if module is None:
            raise LearningModuleNotFoundError(plan_id, module_id)

        task = module.find_task(TaskId(task_id))
        if task is None:
            raise LearningTaskNotFoundError(module_id, task_id)

        now = datetime.now(UTC)
        if not task.mark_completed(now):
            logger.info(
                "task_already_completed",
                plan_id=plan_id,
                module_id=str(module_id),
                task_id=str(task_id),
            )
            return plan

        ProgressAggregator.recompute_module(module)
        ProgressAggregator.recompute_plan(plan)
        plan.touch(now)
        plan = self.learning_plan_repository.save(plan)

        logger.info(
            "updated_plan_progress",
            plan_id=plan_id,
            module_id=str(module_id),
            task_id=str(task_id),
            module_completed_hours=module.completed_hours,
            plan_completed_hours=plan.completed_hours,
        )
        return plan
