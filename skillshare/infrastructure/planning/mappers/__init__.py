from .learning_plan_mapper import LearningPlanMapper

__all__ = ["LearningPlanMapper"]
