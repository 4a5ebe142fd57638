from .create_learning_plan_use_case import CreateLearningPlanUseCase
from .delete_learning_plan_use_case import DeleteLearningPlanUseCase
from .get_learning_plan_use_case import GetLearningPlanUseCase
from .list_learning_plans_use_case import ListLearningPlansUseCase
from .update_learning_plan_use_case import UpdateLearningPlanUseCase
from .update_plan_progress_use_case import UpdatePlanProgressUseCase

__all__ = [
    "CreateLearningPlanUseCase",
    "DeleteLearningPlanUseCase",
    "GetLearningPlanUseCase",
    "ListLearningPlansUseCase",
    "UpdateLearningPlanUseCase",
    "UpdatePlanProgressUseCase",
]
