from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from skillshare.application.identity.use_cases.follow_user_use_case import FollowUserUseCase
from skillshare.application.identity.use_cases.update_user_profile_use_case import (
    UpdateUserProfileUseCase,
)
from skillshare.application.identity.use_cases.user_profile_use_case import UserProfileUseCase
from skillshare.application.planning.use_cases.learning_plans.create_learning_plan_use_case import (
    CreateLearningPlanUseCase,
)
from skillshare.application.planning.use_cases.learning_plans.delete_learning_plan_use_case import (
    DeleteLearningPlanUseCase,
)
from skillshare.application.planning.use_cases.learning_plans.get_learning_plan_use_case import (
    GetLearningPlanUseCase,
)
from skillshare.application.planning.use_cases.learning_plans.list_learning_plans_use_case import (
    ListLearningPlansUseCase,
)
from skillshare.application.planning.use_cases.learning_plans.update_learning_plan_use_case import (
    UpdateLearningPlanUseCase,
)
from skillshare.application.planning.use_cases.learning_plans.update_plan_progress_use_case import (
    UpdatePlanProgressUseCase,
)
from skillshare.application.planning.use_cases.templates.create_plan_from_template_use_case import (
    CreatePlanFromTemplateUseCase,
)
from skillshare.application.planning.use_cases.templates.list_templates_use_case import (
    ListTemplatesUseCase,
)
from skillshare.application.planning.use_cases.templates.seed_templates_use_case import (
    SeedTemplatesUseCase,
)
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder
from skillshare.domain.planning.services.template_cloner import TemplateCloner
from skillshare.infrastructure.identity.repositories.user_repository import UserRepository
from skillshare.infrastructure.planning.repositories.learning_plan_repository import (
    LearningPlanRepository,
)
from skillshare.infrastructure.planning.services.uuid_id_generator import UuidIdGenerator
from skillshare.infrastructure.planning.templates.catalogue import PREDEFINED_TEMPLATES


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    learning_plan_repository = providers.Factory(LearningPlanRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)

    # Id generation
    id_generator = providers.Singleton(UuidIdGenerator)

    # Domain services (pure domain logic, no db)
    plan_tree_builder = providers.Factory(
        PlanTreeBuilder, id_generator=id_generator.provided.new_id
    )
    template_cloner = providers.Factory(
        TemplateCloner, id_generator=id_generator.provided.new_id
    )

    # Planning module, application use cases
    create_learning_plan_use_case = providers.Factory(
        CreateLearningPlanUseCase,
        learning_plan_repository=learning_plan_repository,
        plan_tree_builder=plan_tree_builder,
    )
    get_learning_plan_use_case = providers.Factory(
        GetLearningPlanUseCase,
        learning_plan_repository=learning_plan_repository,
    )
    list_learning_plans_use_case = providers.Factory(
        ListLearningPlansUseCase,
        learning_plan_repository=learning_plan_repository,
    )
    update_learning_plan_use_case = providers.Factory(
        UpdateLearningPlanUseCase,
        learning_plan_repository=learning_plan_repository,
    )
    update_plan_progress_use_case = providers.Factory(
        UpdatePlanProgressUseCase,
        learning_plan_repository=learning_plan_repository,
    )
    delete_learning_plan_use_case = providers.Factory(
        DeleteLearningPlanUseCase,
        learning_plan_repository=learning_plan_repository,
    )

    # Template use cases
    list_templates_use_case = providers.Factory(
        ListTemplatesUseCase,
        learning_plan_repository=learning_plan_repository,
    )
    create_plan_from_template_use_case = providers.Factory(
        CreatePlanFromTemplateUseCase,
        learning_plan_repository=learning_plan_repository,
        template_cloner=template_cloner,
    )
    seed_templates_use_case = providers.Factory(
        SeedTemplatesUseCase,
        learning_plan_repository=learning_plan_repository,
        user_repository=user_repository,
        plan_tree_builder=plan_tree_builder,
        catalogue=PREDEFINED_TEMPLATES,
    )

    # Identity use cases
    user_profile_use_case = providers.Factory(
        UserProfileUseCase,
        user_repository=user_repository,
    )
    follow_user_use_case = providers.Factory(
        FollowUserUseCase,
        user_repository=user_repository,
    )
    update_user_profile_use_case = providers.Factory(
        UpdateUserProfileUseCase,
        user_repository=user_repository,
    )


# Initialize container
container = Container()
