"""Domain service turning a PlanOutline into a fresh plan tree."""

from collections.abc import Callable
from uuid import UUID

from skillshare.domain.common.value_objects.ids import ModuleId, ResourceId, TaskId, UserId
from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.entities.learning_task import LearningTask
from skillshare.domain.planning.entities.resource import Resource
from skillshare.domain.planning.outlines import ModuleOutline, PlanOutline, TaskOutline
from skillshare.domain.planning.services.id_allocator import UniqueIdAllocator
from skillshare.domain.planning.services.progress_aggregator import ProgressAggregator


class PlanTreeBuilder:
    """Builds plans from outlines, giving every module, task and resource a new id."""

    def __init__(self, id_generator: Callable[[], UUID]) -> None:
        self._id_generator = id_generator

    def build(
        self, user_id: UserId, outline: PlanOutline, is_template: bool = False
    ) -> LearningPlan:
        """
        Build an unsaved plan owned by user_id.

        Args:
            user_id: Owner of the new plan
            outline: Titles, estimates and children of the plan
            is_template: Whether the plan is a shared template

        Returns:
            LearningPlan with id 0, zero progress and now timestamps
        """
        allocator = UniqueIdAllocator(self._id_generator)
        plan = LearningPlan.create(
            user_id=user_id,
            title=outline.title,
            description=outline.description,
            category=outline.category,
            estimated_hours=outline.estimated_hours,
            modules=[self._build_module(m, allocator) for m in outline.modules],
            is_template=is_template,
        )
        ProgressAggregator.recompute_tree(plan)
        return plan

    def _build_module(self, outline: ModuleOutline, allocator: UniqueIdAllocator) -> LearningModule:
        return LearningModule.create(
            id=ModuleId(allocator.allocate()),
            title=outline.title,
            description=outline.description,
            estimated_hours=outline.estimated_hours,
            tasks=[self._build_task(t, allocator) for t in outline.tasks],
        )

    def _build_task(self, outline: TaskOutline, allocator: UniqueIdAllocator) -> LearningTask:
        return LearningTask.create(
            id=TaskId(allocator.allocate()),
            title=outline.title,
            description=outline.description,
            estimated_minutes=outline.estimated_minutes,
            resources=[
                Resource.create(
                    id=ResourceId(allocator.allocate()),
                    title=r.title,
                    type=r.type,
                    url=r.url,
                    notes=r.notes,
                )
                for r in outline.resources
            ],
        )
