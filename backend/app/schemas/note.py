"""
Noteful Backend — Note & Folder Response Schemas
==================================================

What:  Pydantic models for the representation of notes and folders returned
       by the API.
How:   Built from ORM rows with `from_attributes`; only the declared fields
       are ever serialized, so unrecognized request fields never leak back.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FolderResponse(BaseModel):
    """Returned by GET/POST /api/folders."""
    id: int = Field(description="Folder identifier (store-assigned)")
    name: str = Field(description="Folder name (sanitized)")

    model_config = {"from_attributes": True}


class NoteResponse(BaseModel):
    """
    Full representation of a note.

    Returned by GET /api/notes, GET /api/notes/{id} and POST /api/notes.
    """
    id: int = Field(description="Note identifier (store-assigned)")
    title: str = Field(description="Note title (sanitized)")
    content: str = Field(description="Note body (sanitized)")
    folder_id: Optional[int] = Field(default=None, description="Owning folder, if any")
    modified: datetime = Field(description="When the note was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}
