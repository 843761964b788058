"""
Noteful Backend — Resource Definitions
========================================

What:  Declarative description of each REST resource exposed by the API.
How:   A ResourceDefinition ties together the URL path, the ORM model, the
       response schema and the field sets used for validation and
       sanitization. The controller, store and router are generic over it,
       so notes, folders, articles and users share one CRUD implementation.

Field sets:
    required_fields: must all be present on create (canonical order)
    optional_fields: accepted on create, never required
    updatable_fields: update_fields when given, otherwise required + optional;
                      identity and store-assigned timestamp columns never
                      appear here
    text_fields: string columns sanitized on write and on read
    reference_fields: integer columns holding the id of a parent row
    choices: enumerated columns and the values they accept
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel

from app.database import Base
from app.models import ARTICLE_STYLES, Article, Folder, Note, User
from app.schemas.article import ArticleResponse, UserResponse
from app.schemas.note import FolderResponse, NoteResponse

# Ids live in signed 32-bit INTEGER columns
MIN_ID = 1
MAX_ID = 2**31 - 1


def is_valid_id(value) -> bool:
    """True for an int that can name a stored row (bool excluded)."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_ID <= value <= MAX_ID
    )


@dataclass(frozen=True)
class ResourceDefinition:
    label: str
    path: str
    model: Type[Base]
    response_model: Type[BaseModel]
    required_fields: Tuple[str, ...]
    optional_fields: Tuple[str, ...] = ()
    text_fields: Tuple[str, ...] = ()
    reference_fields: Tuple[str, ...] = ()
    choices: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    update_fields: Optional[Tuple[str, ...]] = None

    @property
    def allowed_fields(self) -> Tuple[str, ...]:
        return self.required_fields + self.optional_fields

    @property
    def updatable_fields(self) -> Tuple[str, ...]:
        if self.update_fields is not None:
            return self.update_fields
        return self.allowed_fields

    @property
    def collection_url(self) -> str:
        return f"/api/{self.path}"

    def location(self, resource_id: int) -> str:
        """URL of a single resource, used for the Location header."""
        return f"{self.collection_url}/{resource_id}"


FOLDERS = ResourceDefinition(
    label="Folder",
    path="folders",
    model=Folder,
    response_model=FolderResponse,
    required_fields=("name",),
    text_fields=("name",),
)

NOTES = ResourceDefinition(
    label="Note",
    path="notes",
    model=Note,
    response_model=NoteResponse,
    required_fields=("title", "content"),
    optional_fields=("folder_id",),
    reference_fields=("folder_id",),
    text_fields=("title", "content"),
)

USERS = ResourceDefinition(
    label="User",
    path="users",
    model=User,
    response_model=UserResponse,
    required_fields=("fullname", "username"),
    optional_fields=("nickname",),
    text_fields=("fullname", "username", "nickname"),
)

ARTICLES = ResourceDefinition(
    label="Article",
    path="articles",
    model=Article,
    response_model=ArticleResponse,
    required_fields=("title", "style", "content"),
    optional_fields=("author",),
    reference_fields=("author",),
    choices={"style": ARTICLE_STYLES},
    text_fields=("title", "content"),
    # author is set when the article is created
    update_fields=("title", "style", "content"),
)

ALL_RESOURCES: Tuple[ResourceDefinition, ...] = (FOLDERS, NOTES, USERS, ARTICLES)
