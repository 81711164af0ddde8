"""
Bloglist Backend - Blog SQLAlchemy Model
=========================================

What:  ORM model representing the `blogs` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SQLBlogStore for CRUD operations.

Table Design:
    - id: UUID primary key, generated in Python so SQLite and PostgreSQL
      behave the same way
    - title, url: required, non-empty (enforced by BlogService before insert)
    - author: optional
    - likes: NOT NULL, defaults to 0
    - created_at: internal, gives List a stable insertion order; never
      returned by the API
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.database import Base


class Blog(Base):
    """
    A single blog entry.

    Lifecycle:
        1. Inserted by BlogService.create_blog (likes defaulted to 0)
        2. Fields overwritten by BlogService.update_blog
        3. Deleted by BlogService.delete_blog (idempotent)
    """

    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Store-assigned identifier",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    author: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
    )

    url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="Insertion time, used only for List ordering",
    )

    __table_args__ = (
        Index("idx_blogs_created_at", created_at),
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, title='{self.title}', likes={self.likes})>"
