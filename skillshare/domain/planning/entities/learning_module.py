"""Module entity: an ordered group of tasks inside a plan."""

from dataclasses import dataclass, field

from skillshare.domain.common.entity import Entity
from skillshare.domain.common.exceptions import ValidationError
from skillshare.domain.common.value_objects.ids import ModuleId, TaskId

from .learning_task import LearningTask


@dataclass
class LearningModule(Entity[ModuleId]):
    """
    Module inside a learning plan.

    completed_hours is derived from the tasks by the ProgressAggregator
    and is never set from user input.
    """

    id: ModuleId
    title: str
    description: str | None = None
    estimated_hours: int = 0
    completed_hours: int = 0
    tasks: list[LearningTask] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Module title cannot be empty", field="title")
        if self.estimated_hours < 0:
            raise ValidationError(
                "Estimated hours cannot be negative",
                field="estimated_hours",
                value=self.estimated_hours,
            )

    def find_task(self, task_id: TaskId) -> LearningTask | None:
        """Look up a task of this module by id."""
        return next((task for task in self.tasks if task.id == task_id), None)

    @classmethod
    def create(
        cls,
        id: ModuleId,
        title: str,
        description: str | None = None,
        estimated_hours: int = 0,
        tasks: list[LearningTask] | None = None,
    ) -> "LearningModule":
        """Create a new module with zero progress."""
        return cls(
            id=id,
            title=title.strip(),
            description=description,
            estimated_hours=estimated_hours,
            completed_hours=0,
            tasks=list(tasks or []),
        )
