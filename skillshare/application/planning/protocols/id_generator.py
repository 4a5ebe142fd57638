from typing import Protocol
from uuid import UUID


class IdGeneratorProtocol(Protocol):
    def new_id(self) -> UUID: ...
