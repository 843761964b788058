"""
Noteful Backend — Application Package Initializer
===================================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Controller (Business Logic)       │  ← Validation, sanitization,
    │   Validator · Sanitizer             │    existence checks
    ├─────────────────────────────────────┤
    │   Resource Store (Data Access)      │  ← One table per store
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data)           │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (Persistence)            │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
