"""Unit tests for TemplateCloner."""

from datetime import UTC, datetime
from itertools import chain, count
from uuid import UUID, uuid4

import pytest

from skillshare.domain.common.exceptions import BusinessRuleViolationError
from skillshare.domain.common.value_objects.ids import LearningPlanId, UserId
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.entities.resource import ResourceType
from skillshare.domain.planning.outlines import (
    ModuleOutline,
    PlanOutline,
    ResourceOutline,
    TaskOutline,
)
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder
from skillshare.domain.planning.services.progress_aggregator import ProgressAggregator
from skillshare.domain.planning.services.template_cloner import TemplateCloner, subtree_ids

OUTLINE = PlanOutline(
    title="Template",
    category="Programming",
    estimated_hours=12,
    modules=(
        ModuleOutline(
            title="A",
            estimated_hours=5,
            tasks=(
                TaskOutline(
                    title="T1",
                    estimated_minutes=60,
                    resources=(ResourceOutline(title="R1", type=ResourceType.VIDEO),),
                ),
                TaskOutline(title="T2", estimated_minutes=90),
            ),
        ),
        ModuleOutline(title="B", tasks=(TaskOutline(title="T3", estimated_minutes=30),)),
    ),
)


@pytest.fixture
def template() -> LearningPlan:
    plan = PlanTreeBuilder(uuid4).build(UserId(99), OUTLINE, is_template=True)
    plan.id = LearningPlanId(7)
    return plan


class TestTemplateCloner:
    def test_clone_preserves_structure(self, template: LearningPlan) -> None:
        clone = TemplateCloner(uuid4).clone(template, UserId(1))

        assert clone.title == template.title
        assert clone.category == template.category
        assert clone.estimated_hours == template.estimated_hours
        assert [m.title for m in clone.modules] == ["A", "B"]
        assert [t.title for t in clone.iter_tasks()] == ["T1", "T2", "T3"]
        assert [t.estimated_minutes for t in clone.iter_tasks()] == [60, 90, 30]
        assert clone.modules[0].tasks[0].resources[0].title == "R1"
        assert clone.modules[0].tasks[0].resources[0].type is ResourceType.VIDEO

    def test_clone_gets_new_owner_and_identity(self, template: LearningPlan) -> None:
        clone = TemplateCloner(uuid4).clone(template, UserId(1))

        assert clone.id == LearningPlanId(0)
        assert clone.user_id == UserId(1)
        assert clone.is_template is False
        assert clone.created_at is not None

    def test_every_subtree_id_is_fresh(self, template: LearningPlan) -> None:
        clone = TemplateCloner(uuid4).clone(template, UserId(1))

        clone_ids = list(subtree_ids(clone))
        assert len(clone_ids) == len(set(clone_ids)) == 6
        assert set(clone_ids).isdisjoint(subtree_ids(template))

    def test_colliding_generator_is_redrawn(self, template: LearningPlan) -> None:
        """Test that a generator replaying the template's ids still yields fresh ids."""
        replay = chain(subtree_ids(template), (UUID(int=n) for n in count(1)))

        clone = TemplateCloner(lambda: next(replay)).clone(template, UserId(1))

        assert set(subtree_ids(clone)).isdisjoint(subtree_ids(template))

    def test_progress_is_reset(self, template: LearningPlan) -> None:
        for task in template.iter_tasks():
            task.completed_at = datetime(2026, 1, 1, tzinfo=UTC)
        ProgressAggregator.recompute_tree(template)
        assert template.completed_hours > 0

        clone = TemplateCloner(uuid4).clone(template, UserId(1))

        assert clone.completed_hours == 0
        assert all(m.completed_hours == 0 for m in clone.modules)
        assert all(t.completed_at is None for t in clone.iter_tasks())

    def test_clone_is_independent(self, template: LearningPlan) -> None:
        clone = TemplateCloner(uuid4).clone(template, UserId(1))

        clone.modules[0].tasks[0].mark_completed(datetime.now(UTC))
        clone.modules[0].tasks.pop()
        clone.modules[0].tasks[0].resources.clear()
        ProgressAggregator.recompute_tree(clone)

        assert template.completed_hours == 0
        assert len(template.modules[0].tasks) == 2
        assert template.modules[0].tasks[0].completed_at is None
        assert len(template.modules[0].tasks[0].resources) == 1

    def test_non_template_rejected(self, template: LearningPlan) -> None:
        template.is_template = False

        with pytest.raises(BusinessRuleViolationError):
            TemplateCloner(uuid4).clone(template, UserId(1))
