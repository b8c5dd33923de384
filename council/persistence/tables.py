"""SQLAlchemy table definitions for Council.

Each store owns two regions: a named counter in ``sequences`` and an ordered
key -> record mapping in its own table. Records are opaque bounded blobs,
so the schema does not change when record fields do.
"""

from sqlalchemy import BigInteger, Column, LargeBinary, MetaData, String, Table

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SEQUENCES TABLE (monotonic counters)
# ============================================================================
sequences_table = Table(
    "sequences",
    metadata,
    Column("name", String(64), primary_key=True),
    Column("value", BigInteger, nullable=False, server_default="0"),
)

# ============================================================================
# PROPOSALS TABLE
# ============================================================================
proposals_table = Table(
    "proposals",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=False),
    Column("record", LargeBinary, nullable=False),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=False),
    Column("record", LargeBinary, nullable=False),
)
