"""DTOs for planning use cases."""

from skillshare.application.planning.use_cases.dtos.plan_dtos import PlanDetails
from skillshare.application.planning.use_cases.dtos.template_dtos import TemplateSummary

__all__ = ["PlanDetails", "TemplateSummary"]
