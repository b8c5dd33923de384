"""Durable record store interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from council.domain.model.common import DomainModel
from council.domain.value import MAX_RECORD_KEY

R = TypeVar("R", bound=DomainModel)


def check_key(key: int) -> int:
    """Validate that ``key`` fits an unsigned 64-bit record key.

    Raises:
        ValueError: If the key is negative or wider than 64 bits
    """
    if isinstance(key, bool) or not isinstance(key, int):
        raise ValueError(f"Record key must be an integer, got {key!r}")
    if key < 0 or key > MAX_RECORD_KEY:
        raise ValueError(f"Record key out of range: {key}")
    return key


class RecordStore(ABC, Generic[R]):
    """Keyed, ordered mapping from a 64-bit id to a bounded-size record.

    Defines the contract shared by every store. Implementations live in the
    persistence layer and must:
    - serialize each record through the bounded codec before writing, so an
      oversized record raises RecordTooLargeError and nothing is written
    - make each successful write durable without any extra step from callers
    - hand out copies; mutating a returned record never affects the store
    """

    @abstractmethod
    def validate(self, key: int, record: R) -> None:
        """Check that ``record`` can be written under ``key`` without writing it.

        Raises:
            ValueError: If the key is out of range
            RecordTooLargeError: If the serialized record exceeds the bound
        """
        pass

    @abstractmethod
    async def insert(self, key: int, record: R) -> Optional[R]:
        """Insert or overwrite the record at ``key``.

        Args:
            key: Record key
            record: Record to store

        Returns:
            The record previously stored at ``key``, or None if the key was free

        Raises:
            RecordTooLargeError: If the serialized record exceeds the bound
        """
        pass

    @abstractmethod
    async def get(self, key: int) -> Optional[R]:
        """Read the record at ``key``.

        Args:
            key: Record key

        Returns:
            The record if present, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count the distinct keys currently stored."""
        pass

    @abstractmethod
    async def items(self, offset: int = 0, limit: int = 100) -> list[tuple[int, R]]:
        """List records in ascending key order.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            (key, record) pairs
        """
        pass
