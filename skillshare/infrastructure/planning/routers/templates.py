"""API routes for the template catalogue."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from skillshare.application.planning.use_cases.templates import (
    CreatePlanFromTemplateUseCase,
    ListTemplatesUseCase,
)
from skillshare.core import container
from skillshare.domain.common.exceptions import DomainError
from skillshare.exceptions import SkillshareError
from skillshare.infrastructure.common.di import inject_use_case
from skillshare.infrastructure.identity.dependencies import CurrentUser
from skillshare.infrastructure.planning.schemas import (
    LearningPlanResponse,
    TemplateResponse,
    TemplatesListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplatesListResponse)
def list_templates(
    current_user: CurrentUser,
    use_case: ListTemplatesUseCase = Depends(inject_use_case(container.list_templates_use_case)),
) -> TemplatesListResponse:
    """Get every template with its module and task counts."""
    return TemplatesListResponse(
        templates=[TemplateResponse.model_validate(t) for t in use_case.list_templates()]
    )


@router.post(
    "/{template_id}/instantiate",
    response_model=LearningPlanResponse,
    status_code=status.HTTP_201_CREATED,
)
def instantiate_template(
    template_id: int,
    current_user: CurrentUser,
    use_case: CreatePlanFromTemplateUseCase = Depends(
        inject_use_case(container.create_plan_from_template_use_case)
    ),
) -> LearningPlanResponse:
    """
    Copy a template into a new personal plan owned by the current user.

    The copy has new ids throughout and no progress.
    """
    try:
        plan = use_case.instantiate(template_id, current_user.id.value)
        return LearningPlanResponse.from_entity(plan)
    except (SkillshareError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to instantiate template {template_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
