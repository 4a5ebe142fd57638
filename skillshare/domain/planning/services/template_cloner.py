"""Domain service instantiating templates as personal plans."""

from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any, TypeVar
from uuid import UUID

from skillshare.domain.common.exceptions import BusinessRuleViolationError
from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.entities.learning_task import LearningTask
from skillshare.domain.planning.services.id_allocator import UniqueIdAllocator
from skillshare.domain.planning.services.progress_aggregator import ProgressAggregator

Node = TypeVar("Node")

# Name of the child list at each tree level. Resources are leaves.
CHILD_FIELDS: dict[type, str] = {
    LearningPlan: "modules",
    LearningModule: "tasks",
    LearningTask: "resources",
}

# Progress state that must not survive into a clone.
PROGRESS_RESET: dict[type, dict[str, Any]] = {
    LearningPlan: {"completed_hours": 0},
    LearningModule: {"completed_hours": 0},
    LearningTask: {"completed_at": None},
}


def subtree_ids(plan: LearningPlan) -> Iterator[UUID]:
    """Yield the ids of every module, task and resource of a plan."""
    for module in plan.modules:
        yield module.id.value
        for task in module.tasks:
            yield task.id.value
            for resource in task.resources:
                yield resource.id.value


class TemplateCloner:
    """
    Deep-copies a template into an independent plan owned by another user.

    The copy keeps titles, descriptions, estimates, resources, counts and
    ordering; it gets a new id at every node, no progress and no shared
    mutable state with the template.
    """

    def __init__(self, id_generator: Callable[[], UUID]) -> None:
        self._id_generator = id_generator

    def clone(self, template: LearningPlan, owner_id: UserId) -> LearningPlan:
        """
        Clone a template for owner_id.

        Args:
            template: Plan with is_template set
            owner_id: User who will own the copy

        Returns:
            Unsaved LearningPlan (id 0) with is_template False

        Raises:
            BusinessRuleViolationError: If the source plan is not a template
        """
        if not template.is_template:
            raise BusinessRuleViolationError(
                "clone_requires_template",
                f"Learning plan {template.id} is not a template",
            )

        allocator = UniqueIdAllocator(self._id_generator, reserved=subtree_ids(template))
        now = datetime.now(UTC)
        plan = self._clone_node(
            template,
            allocator,
            id=LearningPlanId.unsaved(),
            user_id=owner_id,
            is_template=False,
            created_at=now,
            updated_at=now,
        )
        ProgressAggregator.recompute_tree(plan)
        return plan

    def _clone_node(self, node: Node, allocator: UniqueIdAllocator, **overrides: Any) -> Node:
        """
        Copy one node and, recursively, its children.

        The node gets an id from the allocator (unless overridden), its
        progress fields are reset and its child list is rebuilt from clones.
        Remaining fields are immutable scalars and are shared safely.
        """
        node_type = type(node)
        changes: dict[str, Any] = dict(PROGRESS_RESET.get(node_type, {}))
        child_field = CHILD_FIELDS.get(node_type)
        if child_field:
            changes[child_field] = [
                self._clone_node(child, allocator) for child in getattr(node, child_field)
            ]
        if "id" not in overrides:
            changes["id"] = type(node.id)(allocator.allocate())  # type: ignore[attr-defined]
        changes.update(overrides)
        return replace(node, **changes)  # type: ignore[type-var]
