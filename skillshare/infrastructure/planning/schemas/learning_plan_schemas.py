"""Pydantic schemas for learning plan API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_plan import LearningPlan, PlanStatus
from skillshare.domain.planning.entities.learning_task import LearningTask
from skillshare.domain.planning.entities.resource import ResourceType
from skillshare.domain.planning.outlines import (
    ModuleOutline,
    PlanOutline,
    ResourceOutline,
    TaskOutline,
)


class ResourceRequest(BaseModel):
    """Schema for a resource inside a create request."""

    title: str = Field(..., min_length=1, max_length=255, description="Resource title")
    type: ResourceType = Field(..., description="Kind of resource")
    url: str | None = Field(None, max_length=2048, description="Link to the resource")
    notes: str | None = Field(None, description="Free-form notes")

    def to_outline(self) -> ResourceOutline:
        return ResourceOutline(title=self.title, type=self.type, url=self.url, notes=self.notes)


class LearningTaskRequest(BaseModel):
    """Schema for a task inside a create request."""

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: str | None = Field(None, description="Task description")
    estimated_minutes: int = Field(0, ge=0, description="Estimated effort in minutes")
    resources: list[ResourceRequest] = Field(default_factory=list)

    def to_outline(self) -> TaskOutline:
        return TaskOutline(
            title=self.title,
            description=self.description,
            estimated_minutes=self.estimated_minutes,
            resources=tuple(r.to_outline() for r in self.resources),
        )


class LearningModuleRequest(BaseModel):
    """Schema for a module inside a create request."""

    title: str = Field(..., min_length=1, max_length=255, description="Module title")
    description: str | None = Field(None, description="Module description")
    estimated_hours: int = Field(0, ge=0, description="Estimated effort in hours")
    tasks: list[LearningTaskRequest] = Field(default_factory=list)

    def to_outline(self) -> ModuleOutline:
        return ModuleOutline(
            title=self.title,
            description=self.description,
            estimated_hours=self.estimated_hours,
            tasks=tuple(t.to_outline() for t in self.tasks),
        )


class LearningPlanCreateRequest(BaseModel):
    """Schema for creating a learning plan with its module tree."""

    title: str = Field(..., min_length=1, max_length=255, description="Plan title")
    description: str | None = Field(None, description="Plan description")
    category: str | None = Field(None, max_length=100, description="Plan category")
    estimated_hours: int = Field(0, ge=0, description="Estimated effort in hours")
    modules: list[LearningModuleRequest] = Field(default_factory=list)

    def to_outline(self) -> PlanOutline:
        return PlanOutline(
            title=self.title,
            description=self.description,
            category=self.category,
            estimated_hours=self.estimated_hours,
            modules=tuple(m.to_outline() for m in self.modules),
        )


class LearningPlanUpdateRequest(BaseModel):
    """Schema for replacing plan metadata. The module tree is not editable here."""

    title: str = Field(..., min_length=1, max_length=255, description="Plan title")
    description: str | None = Field(None, description="Plan description")
    category: str | None = Field(None, max_length=100, description="Plan category")
    estimated_hours: int = Field(0, ge=0, description="Estimated effort in hours")


class ProgressUpdateRequest(BaseModel):
    """Schema naming the task to mark as completed."""

    module_id: UUID = Field(..., description="Module containing the task")
    task_id: UUID = Field(..., description="Task to mark as completed")


class ResourceResponse(BaseModel):
    id: UUID
    title: str
    type: ResourceType
    url: str | None
    notes: str | None


class LearningTaskResponse(BaseModel):
    id: UUID
    title: str
    description: str | None
    estimated_minutes: int
    completed_at: datetime | None
    resources: list[ResourceResponse]

    @classmethod
    def from_entity(cls, task: LearningTask) -> "LearningTaskResponse":
        return cls(
            id=task.id.value,
            title=task.title,
            description=task.description,
            estimated_minutes=task.estimated_minutes,
            completed_at=task.completed_at,
            resources=[
                ResourceResponse(
                    id=r.id.value, title=r.title, type=r.type, url=r.url, notes=r.notes
                )
                for r in task.resources
            ],
        )


class LearningModuleResponse(BaseModel):
    id: UUID
    title: str
    description: str | None
    estimated_hours: int
    completed_hours: int
    tasks: list[LearningTaskResponse]

    @classmethod
    def from_entity(cls, module: LearningModule) -> "LearningModuleResponse":
        return cls(
            id=module.id.value,
            title=module.title,
            description=module.description,
            estimated_hours=module.estimated_hours,
            completed_hours=module.completed_hours,
            tasks=[LearningTaskResponse.from_entity(t) for t in module.tasks],
        )


class LearningPlanResponse(BaseModel):
    """Schema for a learning plan with its full tree."""

    id: int
    user_id: int
    title: str
    description: str | None
    category: str | None
    estimated_hours: int
    completed_hours: int
    is_template: bool
    status: PlanStatus
    created_at: datetime | None
    updated_at: datetime | None
    modules: list[LearningModuleResponse]

    @classmethod
    def from_entity(cls, plan: LearningPlan) -> "LearningPlanResponse":
        """Build the response from a domain entity."""
        return cls(
            id=plan.id.value,
            user_id=plan.user_id.value,
            title=plan.title,
            description=plan.description,
            category=plan.category,
            estimated_hours=plan.estimated_hours,
            completed_hours=plan.completed_hours,
            is_template=plan.is_template,
            status=plan.status,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
            modules=[LearningModuleResponse.from_entity(m) for m in plan.modules],
        )


class LearningPlansListResponse(BaseModel):
    """Schema for list of learning plans response."""

    learning_plans: list[LearningPlanResponse] = Field(..., description="List of learning plans")

    @classmethod
    def from_entities(cls, plans: list[LearningPlan]) -> "LearningPlansListResponse":
        return cls(learning_plans=[LearningPlanResponse.from_entity(p) for p in plans])
