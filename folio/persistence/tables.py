"""SQLAlchemy table definitions for Folio.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("description", String(200), nullable=True),
    Column("color", String(7), nullable=True),  # '#RGB' or '#RRGGBB'
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_categories_name", categories_table.c.name, unique=True)
Index("idx_categories_slug", categories_table.c.slug, unique=True)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(30), nullable=False),
    Column("slug", String(100), nullable=False),
    # Denormalized: journals (any status) referencing this tag
    Column("journal_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("journal_count >= 0", name="ck_tags_journal_count_non_negative"),
)

Index("idx_tags_name", tags_table.c.name, unique=True)
Index("idx_tags_slug", tags_table.c.slug, unique=True)

# ============================================================================
# JOURNALS TABLE
# ============================================================================
journals_table = Table(
    "journals",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(100), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("content", JSONB, nullable=False),  # Rich text document
    Column("excerpt", String(300), nullable=True),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "category_id",
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("cover_image_id", UUID(as_uuid=True), nullable=True),
    Column("audio_url", Text, nullable=True),
    Column("seo", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("status IN ('draft', 'published')", name="ck_journals_status"),
    CheckConstraint(
        "(status = 'published') = (published_at IS NOT NULL)",
        name="ck_journals_published_at",
    ),
)

Index("idx_journals_slug", journals_table.c.slug, unique=True)
Index("idx_journals_status", journals_table.c.status)
Index("idx_journals_category_id", journals_table.c.category_id)
Index("idx_journals_created_at", journals_table.c.created_at.desc())
Index("idx_journals_published_at", journals_table.c.published_at.desc())

# ============================================================================
# JOURNAL_TAGS TABLE (ordered many-to-many)
# ============================================================================
journal_tags_table = Table(
    "journal_tags",
    metadata,
    Column(
        "journal_id",
        UUID(as_uuid=True),
        ForeignKey("journals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "tag_id",
        UUID(as_uuid=True),
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),  # Order within the journal's list
    PrimaryKeyConstraint("journal_id", "tag_id", name="pk_journal_tags"),
)

Index("idx_journal_tags_tag_id", journal_tags_table.c.tag_id)

# ============================================================================
# PORTFOLIOS TABLE
# ============================================================================
portfolios_table = Table(
    "portfolios",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(140), nullable=False),
    Column("slug", String(100), nullable=False),
    Column("year", Integer, nullable=True),
    Column("categories", ARRAY(String(40)), nullable=False, server_default="{}"),
    Column("cover_image_id", UUID(as_uuid=True), nullable=True),
    Column("intro", Text, nullable=True),
    Column("implementation", Text, nullable=True),
    # Slot name ('image1'..'image8') -> media id or null; absent key = never set
    Column("gallery", JSONB, nullable=False, server_default="{}"),
    Column("excerpt", String(300), nullable=True),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("seo", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("status IN ('draft', 'published')", name="ck_portfolios_status"),
)

Index("idx_portfolios_slug", portfolios_table.c.slug, unique=True)
Index("idx_portfolios_published_at", portfolios_table.c.published_at.desc())
