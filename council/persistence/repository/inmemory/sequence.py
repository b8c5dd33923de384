"""In-memory sequence allocator for testing."""

from council.domain.repository import MAX_SEQUENCE_VALUE, SequenceAllocator
from council.persistence.error import SequenceCorruptedError


class InMemorySequenceAllocator(SequenceAllocator):
    """In-memory implementation of SequenceAllocator for testing."""

    def __init__(self, name: str, start: int = 0) -> None:
        self.name = name
        self._value = start

    async def peek(self) -> int:
        return self._value

    async def next(self) -> int:
        if not 0 <= self._value < MAX_SEQUENCE_VALUE:
            raise SequenceCorruptedError(self.name, self._value)
        current = self._value
        self._value = current + 1
        return current
