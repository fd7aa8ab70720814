"""initial_schema

Create the schema for the bot directory:
- Bots (directory entries with a denormalized vote counter)
- Bot voters (latest vote timestamp per user per bot, drives the cooldown)

Revision ID: 3c1f9a7d2b40
Revises:
Create Date: 2024-03-02 18:12:44.501233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # BOTS table
    # ========================================================================
    op.create_table(
        "bots",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.String(length=64), nullable=False),
        sa.Column(
            "other_owners",
            postgresql.ARRAY(sa.String(length=64)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("name", sa.String(length=32), nullable=False),
        sa.Column("prefix", sa.String(length=15), nullable=False),
        sa.Column("tags", postgresql.ARRAY(sa.String(length=30)), nullable=False),
        sa.Column("library", sa.String(length=30), nullable=False),
        sa.Column("short_description", sa.String(length=300), nullable=False),
        sa.Column("long_description", sa.Text(), nullable=True),
        sa.Column(
            "is_html", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("custom_invite_link", sa.String(length=255), nullable=True),
        sa.Column("support_server", sa.String(length=10), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("votes", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("votes >= 0", name="votes_non_negative"),
        sa.CheckConstraint(
            "cardinality(tags) BETWEEN 1 AND 6", name="tags_between_one_and_six"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index("idx_bots_created_at", "bots", [sa.text("created_at DESC")])
    op.create_index(
        "idx_bots_votes", "bots", [sa.text("votes DESC"), sa.text("created_at DESC")]
    )
    op.create_index("idx_bots_owner_id", "bots", ["owner_id"])

    # GIN index for the tag overlap filter (&&)
    op.execute("CREATE INDEX idx_bots_tags ON bots USING GIN (tags)")

    # ========================================================================
    # BOT_VOTERS table
    # ========================================================================
    op.create_table(
        "bot_voters",
        sa.Column("bot_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("voted_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["bot_id"], ["bots.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("bot_id", "user_id"),
    )

    op.create_index("idx_bot_voters_user_id", "bot_voters", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_bot_voters_user_id", table_name="bot_voters")
    op.drop_table("bot_voters")

    op.execute("DROP INDEX IF EXISTS idx_bots_tags")
    op.drop_index("idx_bots_owner_id", table_name="bots")
    op.drop_index("idx_bots_votes", table_name="bots")
    op.drop_index("idx_bots_created_at", table_name="bots")
    op.drop_table("bots")
