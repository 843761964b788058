"""
Noteful Backend — Article SQLAlchemy Model
============================================

What:  ORM model representing the `articles` table.
Who:   Used by the articles resource store and by Alembic.

Table Design:
    - style: Enumerated text; values outside ARTICLE_STYLES fail the
      `article_category` constraint and surface as a 400
    - date_published: Assigned by the store at creation, never updatable
    - author: Optional reference to users.id; set to NULL when the user is deleted
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

ARTICLE_STYLES = ("Listicle", "How-to", "News", "Interview", "Story")


class Article(Base):
    """A blog article, optionally attributed to a user."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    style: Mapped[str] = mapped_column(
        Enum(*ARTICLE_STYLES, name="article_category", create_constraint=True),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    date_published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this article was published (UTC)",
    )

    author: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<Article(id={self.id}, style='{self.style}', "
            f"date_published='{self.date_published}')>"
        )
