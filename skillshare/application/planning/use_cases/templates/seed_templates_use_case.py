"""Use case for installing the predefined template catalogue."""

from collections.abc import Sequence

import structlog

from skillshare.application.identity.protocols.user_repository import UserRepositoryProtocol
from skillshare.application.planning.protocols.learning_plan_repository import (
    LearningPlanRepositoryProtocol,
)
from skillshare.domain.identity.entities.user import User
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.outlines import PlanOutline
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder

logger = structlog.get_logger(__name__)


class SeedTemplatesUseCase:
    """
    Installs the template catalogue under the system user.

    Runs at startup. Templates are only ever created here, never through the
    public create operation.
    """

    def __init__(
        self,
        learning_plan_repository: LearningPlanRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        plan_tree_builder: PlanTreeBuilder,
        catalogue: Sequence[PlanOutline],
    ) -> None:
        self.learning_plan_repository = learning_plan_repository
        self.user_repository = user_repository
        self.plan_tree_builder = plan_tree_builder
        self.catalogue = catalogue

    def seed(self, system_email: str) -> list[LearningPlan]:
        """
        Create the system user if missing and seed templates if none exist.

        Args:
            system_email: Email identifying the template owner

        Returns:
            The templates created by this call (empty when already seeded)
        """
        owner = self.user_repository.find_by_email(system_email)
        if owner is None:
            owner = self.user_repository.save(
                User.create(email=system_email, first_name="SkillShare", last_name="System")
            )
            logger.info("created_system_user", user_id=owner.id.value)

        if self.learning_plan_repository.find_templates():
            logger.debug("templates_already_seeded")
            return []

        created = [
            self.learning_plan_repository.save(
                self.plan_tree_builder.build(owner.id, outline, is_template=True)
            )
            for outline in self.catalogue
        ]
        logger.info("seeded_templates", count=len(created), owner_id=owner.id.value)
        return created
