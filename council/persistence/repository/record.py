"""SQL implementation of the durable record store."""

from typing import Generic, Optional, TypeVar

import logfire
from sqlalchemy import Table, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from council.domain.model.common import DomainModel
from council.domain.repository.record import RecordStore, check_key
from council.persistence.codec import decode_record, decode_replaced, encode_record

R = TypeVar("R", bound=DomainModel)

# Unsigned 64-bit keys are shifted into the signed BIGINT range so that
# column order matches key order on every backend.
_KEY_OFFSET = 2**63


def _to_column(key: int) -> int:
    return key - _KEY_OFFSET


def _from_column(value: int) -> int:
    return value + _KEY_OFFSET


class SqlRecordStore(RecordStore[R], Generic[R]):
    """Record store over a two-column (id, record) table.

    Every write is committed immediately, so a successful ``insert`` is
    durable without any further call.
    """

    model: type[R]

    def __init__(self, session: AsyncSession, table: Table, max_size: int) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session
            table: Table holding the records
            max_size: Maximum serialized record size in bytes
        """
        self.session = session
        self.table = table
        self.max_size = max_size

    def validate(self, key: int, record: R) -> None:
        """Run the pre-write checks without writing."""
        check_key(key)
        encode_record(key, record, self.max_size)

    async def _fetch(self, key: int) -> Optional[bytes]:
        stmt = select(self.table.c.record).where(self.table.c.id == _to_column(key))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert(self, key: int, record: R) -> Optional[R]:
        """Insert or overwrite a record, returning the previous one."""
        check_key(key)
        data = encode_record(key, record, self.max_size)

        with logfire.span(
            f"{self.table.name}_repository.insert", key=key, size=len(data)
        ):
            previous_data = await self._fetch(key)
            previous = (
                decode_replaced(key, previous_data, self.model)
                if previous_data is not None
                else None
            )

            if previous_data is None:
                stmt = insert(self.table).values(id=_to_column(key), record=data)
            else:
                stmt = (
                    update(self.table)
                    .where(self.table.c.id == _to_column(key))
                    .values(record=data)
                )

            try:
                await self.session.execute(stmt)
                await self.session.commit()
            except Exception:
                await self.session.rollback()
                raise

            logfire.debug(
                "Record written",
                table=self.table.name,
                key=key,
                overwrite=previous is not None,
            )
            return previous

    async def get(self, key: int) -> Optional[R]:
        """Read a record by key."""
        check_key(key)
        data = await self._fetch(key)
        if data is None:
            return None
        return decode_record(key, data, self.model)

    async def count(self) -> int:
        """Count stored records."""
        stmt = select(func.count()).select_from(self.table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def items(self, offset: int = 0, limit: int = 100) -> list[tuple[int, R]]:
        """List records in ascending key order."""
        stmt = (
            select(self.table.c.id, self.table.c.record)
            .order_by(self.table.c.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        records = []
        for row in result.fetchall():
            key = _from_column(row.id)
            records.append((key, decode_record(key, row.record, self.model)))
        return records
