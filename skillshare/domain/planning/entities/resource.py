"""Resource entity: reference material attached to a task."""

from dataclasses import dataclass
from enum import StrEnum

from skillshare.domain.common.entity import Entity
from skillshare.domain.common.exceptions import ValidationError
from skillshare.domain.common.value_objects.ids import ResourceId


class ResourceType(StrEnum):
    """Closed set of resource kinds."""

    ARTICLE = "article"
    VIDEO = "video"
    EXERCISE = "exercise"
    BOOK = "book"
    COURSE = "course"
    LINK = "link"


@dataclass
class Resource(Entity[ResourceId]):
    """
    Leaf of the plan tree.

    Business Rules:
    - Title cannot be empty
    - A resource belongs to exactly one task
    """

    id: ResourceId
    title: str
    type: ResourceType
    url: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Resource title cannot be empty", field="title")
        if not isinstance(self.type, ResourceType):
            self.type = ResourceType(self.type)

    @classmethod
    def create(
        cls,
        id: ResourceId,
        title: str,
        type: ResourceType,
        url: str | None = None,
        notes: str | None = None,
    ) -> "Resource":
        """Create a new resource with a freshly allocated id."""
        return cls(
            id=id,
            title=title.strip(),
            type=type,
            url=url.strip() if url else None,
            notes=notes,
        )
