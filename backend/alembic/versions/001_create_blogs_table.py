"""Create blogs table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `blogs` table backing the /api/blogs resource.
How:   Portable column types (Uuid, DateTime with timezone) so the same
       migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table (all blogs are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the blogs table and its ordering index. See bloglist/models/blog.py."""
    op.create_table(
        "blogs",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Store-assigned identifier",
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column(
            "likes",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Insertion time, used only for List ordering",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )

    op.create_index("idx_blogs_created_at", "blogs", ["created_at"])


def downgrade() -> None:
    """Drop the blogs table. Destructive: all blog data is lost."""
    op.drop_index("idx_blogs_created_at", table_name="blogs")
    op.drop_table("blogs")
