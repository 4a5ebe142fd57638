from uuid import UUID, uuid4


class UuidIdGenerator:
    """Random (version 4) identifiers for modules, tasks and resources."""

    def new_id(self) -> UUID:
        return uuid4()
