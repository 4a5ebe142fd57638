"""Use case for browsing the template catalogue."""

from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.application.planning.use_cases.dtos.template_dtos import TemplateSummary


class ListTemplatesUseCase:
    def __init__(self, learning_plan_repository: LearningPlanRepositoryProtocol) -> None:
        self.learning_plan_repository = learning_plan_repository

    def list_templates(self) -> list[TemplateSummary]:
        """Get a summary of every template, visible to all users."""
        return [
            TemplateSummary.from_plan(plan)
            for plan in self.learning_plan_repository.find_templates()
        ]
