"""SQLAlchemy table definitions for the bot directory.

These table definitions are used with SQLAlchemy core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BOTS TABLE
# ============================================================================
bots_table = Table(
    "bots",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("owner_id", String(64), nullable=False),
    Column("other_owners", ARRAY(String(64)), nullable=False, server_default="{}"),
    Column("name", String(32), nullable=False),
    Column("prefix", String(15), nullable=False),
    Column("tags", ARRAY(String(30)), nullable=False),
    Column("library", String(30), nullable=False),
    Column("short_description", String(300), nullable=False),
    Column("long_description", Text, nullable=True),
    Column("is_html", Boolean, nullable=False, server_default="false"),
    Column("custom_invite_link", String(255), nullable=True),
    Column("support_server", String(10), nullable=True),
    Column("website", String(255), nullable=True),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("votes >= 0", name="votes_non_negative"),
    CheckConstraint(
        "cardinality(tags) BETWEEN 1 AND 6", name="tags_between_one_and_six"
    ),
)

Index("idx_bots_created_at", bots_table.c.created_at.desc())
Index("idx_bots_votes", bots_table.c.votes.desc(), bots_table.c.created_at.desc())
Index("idx_bots_owner_id", bots_table.c.owner_id)
# Note: GIN index on tags is created in migration, not here

# ============================================================================
# BOT_VOTERS TABLE (latest vote per user per bot)
# ============================================================================
bot_voters_table = Table(
    "bot_voters",
    metadata,
    Column(
        "bot_id",
        UUID,
        ForeignKey("bots.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", String(64), primary_key=True),
    Column("voted_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_bot_voters_user_id", bot_voters_table.c.user_id)
