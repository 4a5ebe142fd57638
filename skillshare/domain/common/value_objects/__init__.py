"""Common value objects shared across all domain modules."""

from .ids import LearningPlanId, ModuleId, ResourceId, TaskId, UserId

__all__ = [
    "LearningPlanId",
    "ModuleId",
    "ResourceId",
    "TaskId",
    "UserId",
]
