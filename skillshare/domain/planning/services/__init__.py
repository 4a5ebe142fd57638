from .id_allocator import UniqueIdAllocator
from .plan_tree_builder import PlanTreeBuilder
from .progress_aggregator import ProgressAggregator
from .template_cloner import TemplateCloner

__all__ = [
    "PlanTreeBuilder",
    "ProgressAggregator",
    "TemplateCloner",
    "UniqueIdAllocator",
]
