"""initial_schema

Create the content schema for Folio:
- Categories (one per journal, optional)
- Tags (with a denormalized journal count)
- Journals (rich text entries with draft/published workflow)
- Journal tags (ordered many-to-many)
- Portfolios (project showcases with an eight-slot gallery)

Revision ID: 3c1f7a9e2b40
Revises:
Create Date: 2026-10-18 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f7a9e2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # CATEGORIES table
    # ========================================================================
    op.create_table(
        "categories",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column("color", sa.String(7), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_categories_name", "categories", ["name"], unique=True)
    op.create_index("idx_categories_slug", "categories", ["slug"], unique=True)

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("journal_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "journal_count >= 0", name="ck_tags_journal_count_non_negative"
        ),
    )
    op.create_index("idx_tags_name", "tags", ["name"], unique=True)
    op.create_index("idx_tags_slug", "tags", ["slug"], unique=True)

    # ========================================================================
    # JOURNALS table
    # ========================================================================
    op.create_table(
        "journals",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("content", postgresql.JSONB(), nullable=False),
        sa.Column("excerpt", sa.String(300), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("category_id", sa.UUID(), nullable=True),
        sa.Column("cover_image_id", sa.UUID(), nullable=True),
        sa.Column("audio_url", sa.Text(), nullable=True),
        sa.Column(
            "seo", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'")
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('draft', 'published')", name="ck_journals_status"
        ),
        sa.CheckConstraint(
            "(status = 'published') = (published_at IS NOT NULL)",
            name="ck_journals_published_at",
        ),
    )
    op.create_index("idx_journals_slug", "journals", ["slug"], unique=True)
    op.create_index("idx_journals_status", "journals", ["status"])
    op.create_index("idx_journals_category_id", "journals", ["category_id"])
    op.create_index(
        "idx_journals_created_at", "journals", [sa.text("created_at DESC")]
    )
    op.create_index(
        "idx_journals_published_at", "journals", [sa.text("published_at DESC")]
    )

    # ========================================================================
    # JOURNAL_TAGS table (ordered many-to-many)
    # ========================================================================
    op.create_table(
        "journal_tags",
        sa.Column("journal_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["journal_id"], ["journals.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("journal_id", "tag_id", name="pk_journal_tags"),
    )
    op.create_index("idx_journal_tags_tag_id", "journal_tags", ["tag_id"])

    # ========================================================================
    # PORTFOLIOS table
    # ========================================================================
    op.create_table(
        "portfolios",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(140), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column(
            "categories",
            postgresql.ARRAY(sa.String(40)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("cover_image_id", sa.UUID(), nullable=True),
        sa.Column("intro", sa.Text(), nullable=True),
        sa.Column("implementation", sa.Text(), nullable=True),
        sa.Column(
            "gallery",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("excerpt", sa.String(300), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "seo", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'")
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('draft', 'published')", name="ck_portfolios_status"
        ),
    )
    op.create_index("idx_portfolios_slug", "portfolios", ["slug"], unique=True)
    op.create_index(
        "idx_portfolios_published_at", "portfolios", [sa.text("published_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("portfolios")
    op.drop_table("journal_tags")
    op.drop_table("journals")
    op.drop_table("tags")
    op.drop_table("categories")
