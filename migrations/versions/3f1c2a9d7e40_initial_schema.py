"""initial_schema

Create the durable record stores for Council:
- Sequences (named monotonic counters)
- Proposals (u64 key -> bounded record)
- Posts (u64 key -> bounded record)

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-18 10:12:04.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "sequences",
        sa.Column("name", sa.String(64), primary_key=True),
        sa.Column("value", sa.BigInteger(), nullable=False, server_default="0"),
    )

    # Keys are stored shifted by 2**63 so that BIGINT order matches u64 order
    op.create_table(
        "proposals",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("record", sa.LargeBinary(), nullable=False),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("record", sa.LargeBinary(), nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("posts")
    op.drop_table("proposals")
    op.drop_table("sequences")
