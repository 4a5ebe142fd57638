from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from skillshare.core import container
from skillshare.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """Turn a container provider into a FastAPI dependency built on the request session."""

    def build(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return build
