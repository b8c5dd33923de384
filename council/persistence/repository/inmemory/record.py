"""In-memory record store for testing."""

from typing import Generic, Optional, TypeVar

from council.domain.model.common import DomainModel
from council.domain.repository.record import RecordStore, check_key
from council.persistence.codec import decode_record, decode_replaced, encode_record

R = TypeVar("R", bound=DomainModel)


class InMemoryRecordStore(RecordStore[R], Generic[R]):
    """In-memory implementation of RecordStore.

    Records are kept in their encoded form, so the size bound applies
    exactly as it does for the SQL store and every read returns a copy.
    """

    model: type[R]

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._records: dict[int, bytes] = {}

    def validate(self, key: int, record: R) -> None:
        """Run the pre-write checks without writing."""
        check_key(key)
        encode_record(key, record, self.max_size)

    async def insert(self, key: int, record: R) -> Optional[R]:
        """Insert or overwrite a record, returning the previous one."""
        check_key(key)
        data = encode_record(key, record, self.max_size)
        previous = self._records.get(key)
        self._records[key] = data
        if previous is None:
            return None
        return decode_replaced(key, previous, self.model)

    async def get(self, key: int) -> Optional[R]:
        """Read a record by key."""
        check_key(key)
        data = self._records.get(key)
        return decode_record(key, data, self.model) if data is not None else None

    async def count(self) -> int:
        """Count stored records."""
        return len(self._records)

    async def items(self, offset: int = 0, limit: int = 100) -> list[tuple[int, R]]:
        """List records in ascending key order."""
        keys = sorted(self._records)[offset : offset + limit]
        return [(key, decode_record(key, self._records[key], self.model)) for key in keys]

    def raw(self, key: int) -> Optional[bytes]:
        """Return the stored bytes for ``key`` (test inspection helper)."""
        return self._records.get(key)
