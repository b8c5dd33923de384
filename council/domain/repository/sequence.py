"""Sequence allocator interface."""

from abc import ABC, abstractmethod

# Counters are persisted as signed 64-bit integers
MAX_SEQUENCE_VALUE = 2**63 - 1


class SequenceAllocator(ABC):
    """Persisted monotonic counter for system-assigned identifiers.

    The counter starts at 0. Values are never handed out twice, including
    across process restarts.
    """

    name: str

    @abstractmethod
    async def peek(self) -> int:
        """Return the value the next call to ``next`` will hand out."""
        pass

    @abstractmethod
    async def next(self) -> int:
        """Return the current value and persist ``current + 1``.

        Raises:
            SequenceCorruptedError: If the stored counter is invalid or exhausted
        """
        pass
