"""
Domain common module.

Identity primitives and the domain exception hierarchy shared by the
planning and identity models.
"""

from .entity import Entity, EntityId, GeneratedId, NumericId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    ValidationError,
)

__all__ = [
    "BusinessRuleViolationError",
    "DomainError",
    "Entity",
    "EntityId",
    "GeneratedId",
    "NumericId",
    "ValidationError",
]
