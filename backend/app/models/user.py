"""
Noteful Backend — User SQLAlchemy Model
=========================================

What:  ORM model for the `users` table, the parent collection of articles.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """An article author. `username` is unique across users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    fullname: Mapped[str] = mapped_column(Text, nullable=False)

    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    nickname: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
