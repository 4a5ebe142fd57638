"""Planning context schemas."""

from skillshare.infrastructure.planning.schemas.learning_plan_schemas import (
    LearningModuleRequest,
    LearningModuleResponse,
    LearningPlanCreateRequest,
    LearningPlanResponse,
    LearningPlansListResponse,
    LearningPlanUpdateRequest,
    LearningTaskRequest,
    LearningTaskResponse,
    ProgressUpdateRequest,
    ResourceRequest,
    ResourceResponse,
)
from skillshare.infrastructure.planning.schemas.template_schemas import (
    TemplateResponse,
    TemplatesListResponse,
)

__all__ = [
    "LearningModuleRequest",
    "LearningModuleResponse",
    "LearningPlanCreateRequest",
    "LearningPlanResponse",
    "LearningPlanUpdateRequest",
    "LearningPlansListResponse",
    "LearningTaskRequest",
    "LearningTaskResponse",
    "ProgressUpdateRequest",
    "ResourceRequest",
    "ResourceResponse",
    "TemplateResponse",
    "TemplatesListResponse",
]
