from .learning_plan_repository import LearningPlanRepository

__all__ = ["LearningPlanRepository"]
