"""
LearningPlan aggregate root.

A plan exclusively owns its modules, each module its tasks and each task
its resources. Children are addressed by id within their parent; nothing
below the plan is shared with another plan.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from skillshare.domain.common.entity import Entity
from skillshare.domain.common.exceptions import ValidationError
from skillshare.domain.common.value_objects.ids import LearningPlanId, ModuleId, UserId

from .learning_module import LearningModule
from .learning_task import LearningTask


class PlanStatus(StrEnum):
    """Progress state of a plan, derived from its tasks."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


@dataclass
class LearningPlan(Entity[LearningPlanId]):
    """
    Learning plan owned by a user, or a template shared with everyone.

    Business Rules:
    - Title cannot be empty
    - Estimated hours cannot be negative
    - completed_hours is the sum of module completed hours (kept by the
      ProgressAggregator)
    - Ownership covers the whole subtree; there is no ownership below the plan
    - Templates are read-shared with all users and never receive progress
    """

    id: LearningPlanId
    user_id: UserId
    title: str
    description: str | None = None
    category: str | None = None
    estimated_hours: int = 0
    completed_hours: int = 0
    is_template: bool = False
    modules: list[LearningModule] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Plan title cannot be empty", field="title")
        if self.estimated_hours < 0:
            raise ValidationError(
                "Estimated hours cannot be negative",
                field="estimated_hours",
                value=self.estimated_hours,
            )

    # Query methods
    def belongs_to_user(self, user_id: UserId) -> bool:
        """Check if the given user owns this plan."""
        return self.user_id == user_id

    def is_visible_to(self, user_id: UserId) -> bool:
        """Templates are visible to everyone, personal plans only to their owner."""
        return self.is_template or self.belongs_to_user(user_id)

    def find_module(self, module_id: ModuleId) -> LearningModule | None:
        """Look up a module of this plan by id."""
        return next((module for module in self.modules if module.id == module_id), None)

    def iter_tasks(self) -> Iterator[LearningTask]:
        """Yield every task of the plan in module order."""
        for module in self.modules:
            yield from module.tasks

    @property
    def module_count(self) -> int:
        return len(self.modules)

    @property
    def task_count(self) -> int:
        return sum(len(module.tasks) for module in self.modules)

    @property
    def status(self) -> PlanStatus:
        tasks = list(self.iter_tasks())
        completed = sum(1 for task in tasks if task.is_completed)
        if completed == 0:
            return PlanStatus.NOT_STARTED
        if completed == len(tasks):
            return PlanStatus.COMPLETED
        return PlanStatus.IN_PROGRESS

    # Command methods
    def update_details(
        self,
        title: str,
        description: str | None,
        category: str | None,
        estimated_hours: int,
    ) -> None:
        """
        Replace the plan metadata.

        The module/task/resource subtree is left untouched.

        Raises:
            ValidationError: If title is empty or estimated hours negative
        """
        if not title or not title.strip():
            raise ValidationError("Plan title cannot be empty", field="title")
        if estimated_hours < 0:
            raise ValidationError(
                "Estimated hours cannot be negative",
                field="estimated_hours",
                value=estimated_hours,
            )
        self.title = title.strip()
        self.description = description
        self.category = category
        self.estimated_hours = estimated_hours
        self.touch()

    def touch(self, now: datetime | None = None) -> None:
        """Record a modification."""
        self.updated_at = now or datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        description: str | None = None,
        category: str | None = None,
        estimated_hours: int = 0,
        modules: list[LearningModule] | None = None,
        is_template: bool = False,
    ) -> "LearningPlan":
        """Create a new plan with zero progress (ID will be 0 until persisted)."""
        now = datetime.now(UTC)
        return cls(
            id=LearningPlanId.unsaved(),
            user_id=user_id,
            title=title.strip(),
            description=description,
            category=category,
            estimated_hours=estimated_hours,
            completed_hours=0,
            is_template=is_template,
            modules=list(modules or []),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LearningPlanId,
        user_id: UserId,
        title: str,
        description: str | None,
        category: str | None,
        estimated_hours: int,
        completed_hours: int,
        is_template: bool,
        modules: list[LearningModule],
        created_at: datetime,
        updated_at: datetime,
    ) -> "LearningPlan":
        """Reconstitute a plan from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            description=description,
            category=category,
            estimated_hours=estimated_hours,
            completed_hours=completed_hours,
            is_template=is_template,
            modules=modules,
            created_at=created_at,
            updated_at=updated_at,
        )
