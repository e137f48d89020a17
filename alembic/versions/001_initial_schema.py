"""Initial schema - document and revision ledger.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("last_edited_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_checkpoint_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "revision",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        # Delta from the previous revision's text to this one; NULL on genesis only
        sa.Column("patch", sa.LargeBinary(), nullable=True),
        # Full text; set on the head revision only
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("length", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("editor_id", sa.String(255), nullable=True),
    )
    op.create_index(
        "ix_revision_document_id_created_at",
        "revision",
        ["document_id", "created_at"],
        unique=True,
    )
    op.create_index(
        "ux_revision_document_head",
        "revision",
        ["document_id"],
        unique=True,
        postgresql_where=sa.text("content IS NOT NULL"),
    )


def downgrade() -> None:
    op.drop_index("ux_revision_document_head", table_name="revision")
    op.drop_index("ix_revision_document_id_created_at", table_name="revision")
    op.drop_table("revision")
    op.drop_table("document")
