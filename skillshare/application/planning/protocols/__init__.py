from .id_generator import IdGeneratorProtocol
from .learning_plan_repository import LearningPlanRepositoryProtocol

__all__ = ["IdGeneratorProtocol", "LearningPlanRepositoryProtocol"]
