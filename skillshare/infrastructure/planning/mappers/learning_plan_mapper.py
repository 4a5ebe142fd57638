"""Mapper for LearningPlan ORM ↔ Domain conversion."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from skillshare.domain.common.value_objects.ids import (
    LearningPlanId,
    ModuleId,
    ResourceId,
    TaskId,
    UserId,
)
from skillshare.domain.planning.entities.learning_module import LearningModule
from skillshare.domain.planning.entities.learning_plan import LearningPlan
from skillshare.domain.planning.entities.learning_task import LearningTask
from skillshare.domain.planning.entities.resource import Resource, ResourceType
from skillshare.models import LearningModule as LearningModuleORM
from skillshare.models import LearningPlan as LearningPlanORM
from skillshare.models import LearningResource as LearningResourceORM
from skillshare.models import LearningTask as LearningTaskORM

Row = TypeVar("Row", LearningModuleORM, LearningTaskORM, LearningResourceORM)


class LearningPlanMapper:
    """
    Mapper for LearningPlan ORM ↔ Domain conversion.

    The whole subtree is mapped in one go. When updating, child rows are
    matched to domain nodes by id: matching rows are updated in place, new
    nodes get new rows and rows with no counterpart are dropped (the
    relationships' delete-orphan cascade removes them). Positions are taken
    from the domain list order.
    """

    def to_domain(self, orm_model: LearningPlanORM) -> LearningPlan:
        """Convert ORM model to domain entity."""
        return LearningPlan.create_with_id(
            id=LearningPlanId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            description=orm_model.description,
            category=orm_model.category,
            estimated_hours=orm_model.estimated_hours,
            completed_hours=orm_model.completed_hours,
            is_template=orm_model.is_template,
            modules=[self._module_to_domain(m) for m in orm_model.modules],
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def _module_to_domain(self, orm_model: LearningModuleORM) -> LearningModule:
        return LearningModule(
            id=ModuleId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            estimated_hours=orm_model.estimated_hours,
            completed_hours=orm_model.completed_hours,
            tasks=[self._task_to_domain(t) for t in orm_model.tasks],
        )

    def _task_to_domain(self, orm_model: LearningTaskORM) -> LearningTask:
        return LearningTask(
            id=TaskId(orm_model.id),
            title=orm_model.title,
            description=orm_model.description,
            estimated_minutes=orm_model.estimated_minutes,
            completed_at=orm_model.completed_at,
            resources=[
                Resource(
                    id=ResourceId(r.id),
                    title=r.title,
                    type=ResourceType(r.type),
                    url=r.url,
                    notes=r.notes,
                )
                for r in orm_model.resources
            ],
        )

    def to_orm(
        self, domain_entity: LearningPlan, orm_model: LearningPlanORM | None = None
    ) -> LearningPlanORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = LearningPlanORM()
            if domain_entity.id.is_persisted:
                orm_model.id = domain_entity.id.value
            if domain_entity.created_at is not None:
                orm_model.created_at = domain_entity.created_at

        orm_model.user_id = domain_entity.user_id.value
        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.category = domain_entity.category
        orm_model.estimated_hours = domain_entity.estimated_hours
        orm_model.completed_hours = domain_entity.completed_hours
        orm_model.is_template = domain_entity.is_template
        if domain_entity.updated_at is not None:
            orm_model.updated_at = domain_entity.updated_at
        orm_model.modules = _reconcile(
            list(orm_model.modules), domain_entity.modules, LearningModuleORM, self._apply_module
        )
        return orm_model

    def _apply_module(self, row: LearningModuleORM, module: LearningModule) -> None:
        row.title = module.title
        row.description = module.description
        row.estimated_hours = module.estimated_hours
        row.completed_hours = module.completed_hours
        row.tasks = _reconcile(list(row.tasks), module.tasks, LearningTaskORM, self._apply_task)

    def _apply_task(self, row: LearningTaskORM, task: LearningTask) -> None:
        row.title = task.title
        row.description = task.description
        row.estimated_minutes = task.estimated_minutes
        row.completed_at = task.completed_at
        row.resources = _reconcile(
            list(row.resources), task.resources, LearningResourceORM, self._apply_resource
        )

    @staticmethod
    def _apply_resource(row: LearningResourceORM, resource: Resource) -> None:
        row.title = resource.title
        row.type = resource.type.value
        row.url = resource.url
        row.notes = resource.notes


def _reconcile(
    rows: Sequence[Row],
    nodes: Sequence[Any],
    row_type: type[Row],
    apply: Callable[[Row, Any], None],
) -> list[Row]:
    """Return the rows for nodes in order, reusing existing rows with the same id."""
    by_id = {row.id: row for row in rows}
    result: list[Row] = []
    for position, node in enumerate(nodes):
        row = by_id.get(node.id.value) or row_type(id=node.id.value)
        row.position = position
        apply(row, node)
        result.append(row)
    return result
