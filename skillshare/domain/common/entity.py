"""
Identity primitives for the domain model.

Plans and users are numbered by the database, so a freshly built aggregate
carries id 0 until the repository saves it. Modules, tasks and resources are
identified by UUIDs drawn when the tree is built.
"""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID


@dataclass(frozen=True)
class EntityId:
    """Typed identifier; a ModuleId is never accepted where a TaskId is expected."""

    value: int | UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class NumericId(EntityId):
    """Database-assigned identifier. 0 marks a record that was never saved."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} must be non-negative")

    @classmethod
    def unsaved(cls) -> Self:
        return cls(0)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0


@dataclass(frozen=True)
class GeneratedId(EntityId):
    """Application-assigned identifier."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError(f"{type(self).__name__} must wrap a UUID")


IdType = TypeVar("IdType", bound=EntityId)


class Entity(Generic[IdType]):
    """Base for domain objects that carry an identity through state changes."""

    id: IdType
