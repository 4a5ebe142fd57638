"""DTOs for learning plan use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlanDetails:
    """Metadata replaced by an update; the plan tree is not part of it."""

    title: str
    description: str | None = None
    category: str | None = None
    estimated_hours: int = 0
