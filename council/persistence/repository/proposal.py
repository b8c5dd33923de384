"""SQL implementation of Proposal repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from council.domain.model import Proposal
from council.domain.repository import ProposalRepository
from council.persistence.repository.record import SqlRecordStore
from council.persistence.tables import proposals_table


class SqlProposalRepository(SqlRecordStore[Proposal], ProposalRepository):
    """SQL implementation of ProposalRepository."""

    model = Proposal

    def __init__(self, session: AsyncSession, max_size: int) -> None:
        super().__init__(session, proposals_table, max_size)
