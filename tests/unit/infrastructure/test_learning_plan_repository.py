"""Tests for LearningPlanRepository persistence of the plan tree."""

from unittest.mock import patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillshare import models
from skillshare.domain.common.value_objects.ids import ModuleId, TaskId, UserId
from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_task import LearningTask
from skillshare.domain.planning.entities.resource import ResourceType
from skillshare.domain.planning.outlines import (
    ModuleOutline,
    PlanOutline,
    ResourceOutline,
    TaskOutline,
)
from skillshare.domain.planning.services.plan_tree_builder import PlanTreeBuilder
from skillshare.infrastructure.planning.repositories.learning_plan_repository import (
    LearningPlanRepository,
)

OUTLINE = PlanOutline(
    title="Plan",
    modules=(
        ModuleOutline(
            title="First",
            tasks=(
                TaskOutline(
                    title="T1",
                    estimated_minutes=60,
                    resources=(
                        ResourceOutline(title="R1", type=ResourceType.BOOK),
                        ResourceOutline(title="R2", type=ResourceType.LINK, url="https://x.y"),
                    ),
                ),
                TaskOutline(title="T2", estimated_minutes=30),
            ),
        ),
        ModuleOutline(title="Second"),
    ),
)


class TestLearningPlanRepository:
    def test_round_trip_keeps_order(self, db_session: Session, test_user: models.User) -> None:
        repository = LearningPlanRepository(db_session)

        saved = repository.save(PlanTreeBuilder(uuid4).build(UserId(test_user.id), OUTLINE))
        loaded = repository.find_by_id(saved.id)

        assert loaded is not None
        assert [m.title for m in loaded.modules] == ["First", "Second"]
        assert [t.title for t in loaded.modules[0].tasks] == ["T1", "T2"]
        assert [r.title for r in loaded.modules[0].tasks[0].resources] == ["R1", "R2"]
        assert loaded.modules[0].tasks[0].resources[1].type is ResourceType.LINK
        assert loaded.modules[0].id == saved.modules[0].id

    def test_update_reconciles_children(self, db_session: Session, test_user: models.User) -> None:
        repository = LearningPlanRepository(db_session)
        plan = repository.save(PlanTreeBuilder(uuid4).build(UserId(test_user.id), OUTLINE))

        first = plan.modules[0]
        first.tasks.reverse()
        first.tasks[0].title = "T2 renamed"
        plan.modules.pop()
        plan.modules.insert(
            0,
            LearningModule.create(
                id=ModuleId(uuid4()),
                title="Intro",
                tasks=[LearningTask.create(id=TaskId(uuid4()), title="Hello")],
            ),
        )
        repository.save(plan)
        db_session.expire_all()

        loaded = repository.find_by_id(plan.id)
        assert loaded is not None
        assert [m.title for m in loaded.modules] == ["Intro", "First"]
        assert [t.title for t in loaded.modules[1].tasks] == ["T2 renamed", "T1"]
        assert db_session.query(models.LearningModule).count() == 2
        assert db_session.query(models.LearningTask).count() == 3

    def test_find_by_owner_excludes_templates(
        self, db_session: Session, test_user: models.User
    ) -> None:
        repository = LearningPlanRepository(db_session)
        builder = PlanTreeBuilder(uuid4)
        repository.save(builder.build(UserId(test_user.id), OUTLINE))
        repository.save(builder.build(UserId(test_user.id), OUTLINE, is_template=True))

        assert len(repository.find_by_owner(UserId(test_user.id))) == 1
        assert len(repository.find_templates()) == 1

    def test_delete(self, db_session: Session, test_user: models.User) -> None:
        repository = LearningPlanRepository(db_session)
        plan = repository.save(PlanTreeBuilder(uuid4).build(UserId(test_user.id), OUTLINE))

        assert repository.delete(plan.id) is True
        assert repository.delete(plan.id) is False
        assert db_session.query(models.LearningResource).count() == 0

    def test_failed_delete_rolls_back(self, db_session: Session, test_user: models.User) -> None:
        repository = LearningPlanRepository(db_session)
        plan = repository.save(PlanTreeBuilder(uuid4).build(UserId(test_user.id), OUTLINE))

        with (
            patch.object(db_session, "commit", side_effect=SQLAlchemyError("disk full")),
            patch.object(db_session, "rollback", wraps=db_session.rollback) as rollback,
            pytest.raises(SQLAlchemyError),
        ):
            repository.delete(plan.id)

        rollback.assert_called_once()
        assert repository.find_by_id(plan.id) is not None
        assert db_session.query(models.LearningResource).count() == 2
