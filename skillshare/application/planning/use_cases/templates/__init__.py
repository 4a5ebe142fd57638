from .create_plan_from_template_use_case import CreatePlanFromTemplateUseCase
from .list_templates_use_case import ListTemplatesUseCase
from .seed_templates_use_case import SeedTemplatesUseCase

__all__ = ["CreatePlanFromTemplateUseCase", "ListTemplatesUseCase", "SeedTemplatesUseCase"]
