from .learning_module import LearningModule
from .learning_plan import LearningPlan, PlanStatus
from .learning_task import LearningTask
from .resource import Resource, ResourceType

__all__ = [
    "LearningModule",
    "LearningPlan",
    "LearningTask",
    "PlanStatus",
    "Resource",
    "ResourceType",
]
