"""create_votes_table

Create the vote ledger schema:
- content_kind enum (post, comment, article, article_comment)
- votes: one row per (voter, kind, id), direction +1 / -1

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-19 10:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE content_kind AS ENUM (
                'post', 'comment', 'article', 'article_comment'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "content_kind",
            postgresql.ENUM(
                "post",
                "comment",
                "article",
                "article_comment",
                name="content_kind",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("content_id", sa.BigInteger(), nullable=False),
        sa.Column("direction", sa.SmallInteger(), nullable=False),
        sa.Column(
            "cast_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "content_kind", "content_id", name="uq_votes_voter_target"
        ),
        sa.CheckConstraint("direction IN (1, -1)", name="ck_votes_direction"),
    )
    # The unique constraint's index covers lookups by user_id
    op.create_index("idx_votes_target", "votes", ["content_kind", "content_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_target", table_name="votes")
    op.drop_table("votes")
    op.execute("DROP TYPE IF EXISTS content_kind")
