"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by the notes resource store for CRUD operations and by Alembic.

Table Design:
    - id: Integer identity assigned by the database, never by the client
    - title / content: Free text, always stored sanitized
    - folder_id: Optional reference to folders.id; a nonexistent folder is
      rejected by the foreign key, and deleting a folder cascades to its notes
    - modified: UTC timestamp assigned at creation
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Note(Base):
    """
    Represents a note, optionally filed in a folder.

    Lifecycle:
        1. Created with title and content (folder_id optional)
        2. Partially updated; omitted fields keep their value
        3. Deleted explicitly, or with its folder
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    folder_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=True,
        comment="Owning folder; must reference an existing folder",
    )

    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this note was created (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, folder_id={self.folder_id}, title='{self.title}')>"
