"""Allocation of subtree-unique identifiers."""

from collections.abc import Callable, Iterable
from uuid import UUID

from skillshare.domain.common.exceptions import BusinessRuleViolationError

MAX_DRAWS_PER_ID = 16


class UniqueIdAllocator:
    """
    Hands out ids that are unique within one plan subtree.

    Every id drawn from the generator is checked against the reserved ids
    (for a clone: the ids of the source subtree) and against the ids already
    handed out. Colliding ids are discarded and drawn again.
    """

    def __init__(self, generate: Callable[[], UUID], reserved: Iterable[UUID] = ()) -> None:
        self._generate = generate
        self._used: set[UUID] = set(reserved)

    def allocate(self) -> UUID:
        for _ in range(MAX_DRAWS_PER_ID):
            candidate = self._generate()
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate
        raise BusinessRuleViolationError(
            "unique_subtree_ids",
            f"Id generator produced {MAX_DRAWS_PER_ID} colliding ids in a row",
        )
