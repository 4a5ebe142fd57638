from dataclasses import dataclass

from ..entity import GeneratedId, NumericId


@dataclass(frozen=True)
class UserId(NumericId):
    """User identifier."""


@dataclass(frozen=True)
class LearningPlanId(NumericId):
    """Learning plan identifier. Templates and personal plans share the sequence."""


@dataclass(frozen=True)
class ModuleId(GeneratedId):
    """Identifier of a module inside a learning plan."""


@dataclass(frozen=True)
class TaskId(GeneratedId):
    """Identifier of a task inside a module."""


@dataclass(frozen=True)
class ResourceId(GeneratedId):
    """Identifier of a resource attached to a task."""
