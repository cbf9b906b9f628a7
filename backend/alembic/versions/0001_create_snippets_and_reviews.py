"""create snippets and reviews tables

Revision ID: 0001_create_snippets_and_reviews
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_create_snippets_and_reviews"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "snippets",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("language", sa.Text(), nullable=False),
        sa.Column("max_reviews", sa.Integer(), nullable=False, server_default="3"),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    )
    op.create_index("ix_snippets_is_completed", "snippets", ["is_completed"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("snippet_id", sa.Uuid(as_uuid=True), sa.ForeignKey("snippets.id"), nullable=False),
        sa.Column("reviewer_email", sa.Text(), nullable=False),
        sa.Column("reviewer_name", sa.Text(), nullable=False),
        sa.Column("years_of_experience", sa.Integer(), nullable=False),
        sa.Column("position", sa.Text(), nullable=False),
        sa.Column("general_comment", sa.Text(), nullable=True),
        sa.Column("line_reviews", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.UniqueConstraint("snippet_id", "reviewer_email", name="uq_reviews_snippet_reviewer"),
    )
    op.create_index("ix_reviews_snippet_id", "reviews", ["snippet_id"])


def downgrade() -> None:
    op.drop_index("ix_reviews_snippet_id", table_name="reviews")
    op.drop_table("reviews")
    op.drop_index("ix_snippets_is_completed", table_name="snippets")
    op.drop_table("snippets")
