"""Unit tests for template use cases."""

import pytest

from skillshare.application.planning.use_cases.templates import (
    CreatePlanFromTemplateUseCase,
    ListTemplatesUseCase,
    SeedTemplatesUseCase,
)
from skillshare.domain.common.value_objects.ids import UserId
from skillshare.domain.planning.outlines import PlanOutline
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder
from skillshare.domain.planning.services.template_cloner import TemplateCloner, subtree_ids
from skillshare.exceptions import NotATemplateError, TemplateNotFoundError
from skillshare.infrastructure.planning.templates.catalogue import PREDEFINED_TEMPLATES

SYSTEM_EMAIL = "system@skillshare.local"


@pytest.fixture
def seed(plan_repository, user_repository, id_generator) -> SeedTemplatesUseCase:
    return SeedTemplatesUseCase(
        plan_repository, user_repository, PlanTreeBuilder(id_generator.new_id), PREDEFINED_TEMPLATES
    )


class TestSeedTemplates:
    def test_seed_creates_system_user_and_templates(self, seed, user_repository) -> None:
        created = seed.seed(SYSTEM_EMAIL)

        system_user = user_repository.find_by_email(SYSTEM_EMAIL)
        assert system_user is not None
        assert [t.title for t in created] == [
            "Java Development Learning Path",
            "Spring Boot Development Path",
        ]
        assert all(t.is_template and t.user_id == system_user.id for t in created)

    def test_seed_is_idempotent(self, seed, plan_repository, user_repository) -> None:
        seed.seed(SYSTEM_EMAIL)

        assert seed.seed(SYSTEM_EMAIL) == []
        assert len(plan_repository.find_templates()) == 2
        assert len(user_repository.users) == 1

    def test_seed_skips_when_any_template_exists(
        self, plan_repository, user_repository, id_generator
    ) -> None:
        custom = SeedTemplatesUseCase(
            plan_repository,
            user_repository,
            PlanTreeBuilder(id_generator.new_id),
            (PlanOutline(title="Custom"),),
        )
        custom.seed(SYSTEM_EMAIL)

        seed = SeedTemplatesUseCase(
            plan_repository,
            user_repository,
            PlanTreeBuilder(id_generator.new_id),
            PREDEFINED_TEMPLATES,
        )

        assert seed.seed(SYSTEM_EMAIL) == []


class TestListTemplates:
    def test_summaries(self, seed, plan_repository) -> None:
        seed.seed(SYSTEM_EMAIL)

        summaries = ListTemplatesUseCase(plan_repository).list_templates()

        counts = {s.title: (s.module_count, s.task_count) for s in summaries}
        assert counts == {
            "Java Development Learning Path": (2, 4),
            "Spring Boot Development Path": (1, 2),
        }


class TestCreatePlanFromTemplate:
    def test_instantiate(self, seed, plan_repository, id_generator) -> None:
        template = seed.seed(SYSTEM_EMAIL)[0]
        use_case = CreatePlanFromTemplateUseCase(
            plan_repository, TemplateCloner(id_generator.new_id)
        )

        plan = use_case.instantiate(template.id.value, 5)

        assert plan.id != template.id
        assert plan.user_id == UserId(5)
        assert plan.is_template is False
        assert set(subtree_ids(plan)).isdisjoint(subtree_ids(template))
        stored = plan_repository.find_by_id(template.id)
        assert stored is not None and stored.is_template

    def test_unknown_template(self, plan_repository, id_generator) -> None:
        use_case = CreatePlanFromTemplateUseCase(
            plan_repository, TemplateCloner(id_generator.new_id)
        )

        with pytest.raises(TemplateNotFoundError):
            use_case.instantiate(42, 5)

    def test_personal_plan_is_not_a_template(self, seed, plan_repository, id_generator) -> None:
        template = seed.seed(SYSTEM_EMAIL)[0]
        personal = CreatePlanFromTemplateUseCase(
            plan_repository, TemplateCloner(id_generator.new_id)
        ).instantiate(template.id.value, 5)
        use_case = CreatePlanFromTemplateUseCase(
            plan_repository, TemplateCloner(id_generator.new_id)
        )

        with pytest.raises(NotATemplateError):
            use_case.instantiate(personal.id.value, 5)
