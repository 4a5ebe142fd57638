"""Task entity: the unit of work whose completion drives plan progress."""

from dataclasses import dataclass, field
from datetime import datetime

from skillshare.domain.common.entity import Entity
from skillshare.domain.common.exceptions import ValidationError
from skillshare.domain.common.value_objects.ids import TaskId

from .resource import Resource


@dataclass
class LearningTask(Entity[TaskId]):
    """
    Task inside a learning module.

    Business Rules:
    - Title cannot be empty
    - Estimated minutes cannot be negative
    - A task is complete when completed_at is set; it never goes back
    """

    id: TaskId
    title: str
    description: str | None = None
    estimated_minutes: int = 0
    completed_at: datetime | None = None
    resources: list[Resource] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Task title cannot be empty", field="title")
        if self.estimated_minutes < 0:
            raise ValidationError(
                "Estimated minutes cannot be negative",
                field="estimated_minutes",
                value=self.estimated_minutes,
            )

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def mark_completed(self, completed_at: datetime) -> bool:
        """
        Stamp the task as complete.

        Args:
            completed_at: Completion timestamp

        Returns:
            True if the task changed state, False if it was already complete
        """
        if self.is_completed:
            return False
        self.completed_at = completed_at
        return True

    @classmethod
    def create(
        cls,
        id: TaskId,
        title: str,
        description: str | None = None,
        estimated_minutes: int = 0,
        resources: list[Resource] | None = None,
    ) -> "LearningTask":
        """Create a new, incomplete task."""
        return cls(
            id=id,
            title=title.strip(),
            description=description,
            estimated_minutes=estimated_minutes,
            completed_at=None,
            resources=list(resources or []),
        )
