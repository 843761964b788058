"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model for the `folders` table, the parent collection of notes.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Folder(Base):
    """A named folder grouping notes. Deleting a folder deletes its notes."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Display name of the folder",
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
