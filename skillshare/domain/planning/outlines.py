"""
Outlines describe the shape of a plan tree before it has identities.

They are what a caller authors (a create request, the predefined template
catalogue) and what the PlanTreeBuilder turns into entities.
"""

from dataclasses import dataclass

from .entities.resource import ResourceType


@dataclass(frozen=True)
class ResourceOutline:
    title: str
    type: ResourceType
    url: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class TaskOutline:
    title: str
    description: str | None = None
    estimated_minutes: int = 0
    resources: tuple[ResourceOutline, ...] = ()


@dataclass(frozen=True)
class ModuleOutline:
    title: str
    description: str | None = None
    estimated_hours: int = 0
    tasks: tuple[TaskOutline, ...] = ()


@dataclass(frozen=True)
class PlanOutline:
    title: str
    description: str | None = None
    category: str | None = None
    estimated_hours: int = 0
    modules: tuple[ModuleOutline, ...] = ()
