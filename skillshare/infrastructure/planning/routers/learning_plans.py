"""API routes for learning plan management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from skillshare.application.planning.use_cases.dtos.plan_dtos import PlanDetails
from skillshare.application.planning.use_cases.learning_plans import (
    CreateLearningPlanUseCase,
    DeleteLearningPlanUseCase,
    GetLearningPlanUseCase,
    ListLearningPlansUseCase,
    UpdateLearningPlanUseCase,
    UpdatePlanProgressUseCase,
)
from skillshare.core import container
from skillshare.domain.common.exceptions import DomainError
from skillshare.exceptions import SkillshareError
from skillshare.infrastructure.common.di import inject_use_case
from skillshare.infrastructure.identity.dependencies import CurrentUser
from skillshare.infrastructure.planning.schemas import (
    LearningPlanCreateRequest,
    LearningPlanResponse,
    LearningPlansListResponse,
    LearningPlanUpdateRequest,
    ProgressUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learning-plans", tags=["learning-plans"])

ListUseCase = Annotated[
    ListLearningPlansUseCase,
    Depends(inject_use_case(container.list_learning_plans_use_case)),
]


def _internal_error(message: str, e: Exception) -> HTTPException:
    logger.error(f"{message}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=LearningPlanResponse, status_code=status.HTTP_201_CREATED)
def create_learning_plan(
    request: LearningPlanCreateRequest,
    current_user: CurrentUser,
    use_case: CreateLearningPlanUseCase = Depends(
        inject_use_case(container.create_learning_plan_use_case)
    ),
) -> LearningPlanResponse:
    """
    Create a personal learning plan with its modules, tasks and resources.

    Every node gets a fresh id and progress starts at zero.
    """
    try:
        plan = use_case.create_plan(current_user.id.value, request.to_outline())
        return LearningPlanResponse.from_entity(plan)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _internal_error("Failed to create learning plan", e) from e


@router.get("", response_model=LearningPlansListResponse)
def list_learning_plans(
    current_user: CurrentUser, use_case: ListUseCase
) -> LearningPlansListResponse:
    """Get the current user's learning plans, newest first. Templates are not included."""
    return LearningPlansListResponse.from_entities(use_case.list_plans(current_user.id.value))


@router.get("/status/{plan_status}", response_model=LearningPlansListResponse)
def list_learning_plans_by_status(
    plan_status: str, current_user: CurrentUser, use_case: ListUseCase
) -> LearningPlansListResponse:
    """Get the current user's plans in NOT_STARTED, IN_PROGRESS or COMPLETED state."""
    plans = use_case.list_by_status(current_user.id.value, plan_status)
    return LearningPlansListResponse.from_entities(plans)


@router.get("/category/{category}", response_model=LearningPlansListResponse)
def list_learning_plans_by_category(
    category: str, current_user: CurrentUser, use_case: ListUseCase
) -> LearningPlansListResponse:
    """Get the current user's plans in a category (case-insensitive)."""
    plans = use_case.list_by_category(current_user.id.value, category)
    return LearningPlansListResponse.from_entities(plans)


@router.get("/time-range", response_model=LearningPlansListResponse)
def list_learning_plans_by_time_range(
    current_user: CurrentUser,
    use_case: ListUseCase,
    min_hours: Annotated[int, Query(ge=0)],
    max_hours: Annotated[int, Query(ge=0)],
) -> LearningPlansListResponse:
    """Get the current user's plans whose estimated hours are within [min_hours, max_hours]."""
    plans = use_case.list_by_time_range(current_user.id.value, min_hours, max_hours)
    return LearningPlansListResponse.from_entities(plans)


@router.get("/{plan_id}", response_model=LearningPlanResponse)
def get_learning_plan(
    plan_id: int,
    current_user: CurrentUser,
    use_case: GetLearningPlanUseCase = Depends(
        inject_use_case(container.get_learning_plan_use_case)
    ),
) -> LearningPlanResponse:
    """
    Get a learning plan with its full tree.

    Templates are readable by everyone, personal plans only by their owner.
    """
    try:
        plan = use_case.get_plan(plan_id, current_user.id.value)
        return LearningPlanResponse.from_entity(plan)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to get learning plan {plan_id}", e) from e


@router.put("/{plan_id}", response_model=LearningPlanResponse)
def update_learning_plan(
    plan_id: int,
    request: LearningPlanUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateLearningPlanUseCase = Depends(
        inject_use_case(container.update_learning_plan_use_case)
    ),
) -> LearningPlanResponse:
    """Replace a plan's title, description, category and estimated hours."""
    try:
        plan = use_case.update_plan(
            plan_id,
            current_user.id.value,
            PlanDetails(
                title=request.title,
                description=request.description,
                category=request.category,
                estimated_hours=request.estimated_hours,
            ),
        )
        return LearningPlanResponse.from_entity(plan)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to update learning plan {plan_id}", e) from e


@router.put("/{plan_id}/progress", response_model=LearningPlanResponse)
def update_plan_progress(
    plan_id: int,
    request: ProgressUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdatePlanProgressUseCase = Depends(
        inject_use_case(container.update_plan_progress_use_case)
    ),
) -> LearningPlanResponse:
    """
    Mark a task as completed and return the plan with recomputed hours.

    Marking an already completed task again returns the plan unchanged.
    """
    try:
        plan = use_case.complete_task(
            plan_id, request.module_id, request.task_id, current_user.id.value
        )
        return LearningPlanResponse.from_entity(plan)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to update progress of learning plan {plan_id}", e) from e


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_learning_plan(
    plan_id: int,
    current_user: CurrentUser,
    use_case: DeleteLearningPlanUseCase = Depends(
        inject_use_case(container.delete_learning_plan_use_case)
    ),
) -> None:
    """Delete a plan together with its modules, tasks and resources."""
    try:
        use_case.delete_plan(plan_id, current_user.id.value)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        raise _internal_error(f"Failed to delete learning plan {plan_id}", e) from e
