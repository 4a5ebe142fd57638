"""Pydantic schemas for the template catalogue API."""

from pydantic import BaseModel, Field


class TemplateResponse(BaseModel):
    """Schema for a template catalogue entry."""

    id: int
    title: str
    description: str | None
    category: str | None
    estimated_hours: int
    module_count: int = Field(..., description="Number of modules in the template")
    task_count: int = Field(..., description="Number of tasks across all modules")

    model_config = {"from_attributes": True}


class TemplatesListResponse(BaseModel):
    """Schema for list of templates response."""

    templates: list[TemplateResponse] = Field(..., description="List of templates")
