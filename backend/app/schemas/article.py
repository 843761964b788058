"""
Noteful Backend — Article & User Response Schemas
===================================================

What:  Pydantic models for the representation of articles and their authors.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArticleResponse(BaseModel):
    """
    Full representation of an article.

    Returned by GET /api/articles, GET /api/articles/{id} and
    POST /api/articles (with the store-assigned id and date_published).
    """
    id: int = Field(description="Article identifier (store-assigned)")
    title: str = Field(description="Article title (sanitized)")
    style: str = Field(description="One of Listicle, How-to, News, Interview, Story")
    content: str = Field(description="Article body (sanitized)")
    date_published: datetime = Field(description="Publication timestamp (UTC ISO 8601)")
    author: Optional[int] = Field(default=None, description="Authoring user, if any")

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Returned by GET/POST /api/users."""
    id: int
    fullname: str
    username: str
    nickname: Optional[str] = None
    date_created: datetime

    model_config = {"from_attributes": True}
