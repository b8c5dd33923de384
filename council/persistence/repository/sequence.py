"""SQL implementation of the sequence allocator."""

from typing import Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from council.domain.repository import MAX_SEQUENCE_VALUE, SequenceAllocator
from council.persistence.error import SequenceCorruptedError
from council.persistence.tables import sequences_table


class SqlSequenceAllocator(SequenceAllocator):
    """Named counter stored as one row of the ``sequences`` table."""

    def __init__(self, session: AsyncSession, name: str) -> None:
        """Initialize allocator.

        Args:
            session: SQLAlchemy async session
            name: Counter name; each name is an independent sequence
        """
        self.session = session
        self.name = name

    async def _read(self) -> Optional[int]:
        stmt = select(sequences_table.c.value).where(
            sequences_table.c.name == self.name
        )
        result = await self.session.execute(stmt)
        value = result.scalar_one_or_none()
        if value is not None and not 0 <= value <= MAX_SEQUENCE_VALUE:
            raise SequenceCorruptedError(self.name, value)
        return value

    async def peek(self) -> int:
        """Return the next value without advancing."""
        value = await self._read()
        return 0 if value is None else value

    async def next(self) -> int:
        """Hand out the current value and persist its successor."""
        with logfire.span("sequence.next", name=self.name):
            current = await self._read()

            if current is None:
                current = 0
                stmt = insert(sequences_table).values(name=self.name, value=1)
            elif current == MAX_SEQUENCE_VALUE:
                raise SequenceCorruptedError(self.name, current)
            else:
                stmt = (
                    update(sequences_table)
                    .where(sequences_table.c.name == self.name)
                    .values(value=current + 1)
                )

            try:
                await self.session.execute(stmt)
                await self.session.commit()
            except Exception:
                await self.session.rollback()
                raise

            return current
