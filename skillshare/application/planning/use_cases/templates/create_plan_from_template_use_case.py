"""Use case for instantiating a template as a personal learning plan."""

import structlog

from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.services.template_cloner import TemplateCloner
from skillshare.exceptions import NotATemplateError, TemplateNotFoundError

logger = structlog.get_logger(__name__)


class CreatePlanFromTemplateUseCase:
    """Use case for instantiating a template as a personal learning plan."""

    def __init__(
        self,
        learning_plan_repository: LearningPlanRepositoryProtocol,
        template_cloner: TemplateCloner,
    ) -> None:
        """Initialize use case with repository protocols and the cloner."""
        self.learning_plan_repository = learning_plan_repository
        self.template_cloner = template_cloner

    def instantiate(self, template_id: int, user_id: int) -> LearningPlan:
        """
        Copy a template into a new plan owned by the requester.

        The template itself is never modified.

        Args:
            template_id: ID of the template plan
            user_id: ID of the requesting user

        Returns:
            The newly persisted personal plan

        Raises:
            TemplateNotFoundError: If no plan has the given id
            NotATemplateError: If the plan exists but is not a template
        """
        template = None
        if template_id > 0:
            template = self.learning_plan_repository.find_by_id(LearningPlanId(template_id))
        if not template:
            raise TemplateNotFoundError(template_id)
        if not template.is_template:
            raise NotATemplateError(template_id)

        plan = self.template_cloner.clone(template, UserId(user_id))
        plan = self.learning_plan_repository.save(plan)

        logger.info(
            "instantiated_template",
            template_id=template_id,
            plan_id=plan.id.value,
            user_id=user_id,
        )
        return plan
