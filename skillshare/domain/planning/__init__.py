"""
Planning bounded context - Domain layer.

Hierarchical learning plans: plan -> modules -> tasks -> resources.
Tasks carry the only mutable leaf state (completion); module and plan
completed hours are rollups of that state.

Aggregates:
- LearningPlan: owns its modules, tasks and resources exclusively
"""
