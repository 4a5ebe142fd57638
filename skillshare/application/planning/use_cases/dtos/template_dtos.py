"""DTOs for template use cases."""

from dataclasses import dataclass

from skillshare.domain.planning.entities.learning_plan import LearningPlan


@dataclass(frozen=True)
class TemplateSummary:
    """Catalogue entry for a template plan."""

    id: int
    title: str
    description: str | None
    category: str | None
    estimated_hours: int
    module_count: int
    task_count: int

    @classmethod
    def from_plan(cls, plan: LearningPlan) -> "TemplateSummary":
        return cls(
            id=plan.id.value,
            title=plan.title,
            description=plan.description,
            category=plan.category,
            estimated_hours=plan.estimated_hours,
            module_count=plan.module_count,
            task_count=plan.task_count,
        )
