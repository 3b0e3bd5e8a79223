"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import BigInteger, Column, Index, Integer, MetaData, String, Table, Text

metadata = MetaData()

# ============================================================================
# TIMELOCKS TABLE
# ============================================================================
timelocks_table = Table(
    "timelocks",
    metadata,
    Column("id", String, primary_key=True),
    Column("creator", String, nullable=False),
    Column("title", String, nullable=False),
    Column("content", Text, nullable=False),  # Placeholder, then IBE ciphertext
    Column("unlock_time", BigInteger, nullable=False),  # Unix seconds
    Column("release_identity", String, nullable=False, unique=True),
)

# ============================================================================
# OWNERSHIP INDEX (creator -> ids in creation order)
# ============================================================================
timelock_owners_table = Table(
    "timelock_owners",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("owner", String, nullable=False),
    Column("timelock_id", String, nullable=False),
)

Index("idx_timelock_owners_owner", timelock_owners_table.c.owner)
