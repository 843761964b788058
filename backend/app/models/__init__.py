"""
Noteful Backend — ORM Models
==============================

Importing this package registers every table on Base.metadata
(used by create_tables() and by Alembic autogenerate).
"""

from app.models.folder import Folder
from app.models.note import Note
from app.models.user import User
from app.models.article import Article, ARTICLE_STYLES

__all__ = ["Folder", "Note", "User", "Article", "ARTICLE_STYLES"]
