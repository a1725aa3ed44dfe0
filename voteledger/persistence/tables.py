"""SQLAlchemy table definitions for the vote ledger.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Index,
    MetaData,
    SmallInteger,
    Table,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from voteledger.domain.value import ContentKind

# Metadata object for all tables
metadata = MetaData()

CONTENT_KINDS = tuple(kind.value for kind in ContentKind)

# Name of the (voter, kind, id) uniqueness constraint; upserts target it
VOTER_TARGET_CONSTRAINT = "uq_votes_voter_target"

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    # Users live in the auth service's database, so no foreign key
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "content_kind",
        postgresql.ENUM(*CONTENT_KINDS, name="content_kind", create_type=False),
        nullable=False,
    ),
    Column("content_id", BigInteger, nullable=False),
    Column("direction", SmallInteger, nullable=False),
    Column(
        "cast_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint(
        "user_id", "content_kind", "content_id", name=VOTER_TARGET_CONSTRAINT
    ),
    CheckConstraint("direction IN (1, -1)", name="ck_votes_direction"),
)

# Tallies count by target; per-user lookups use the unique constraint's index
Index("idx_votes_target", votes_table.c.content_kind, votes_table.c.content_id)
