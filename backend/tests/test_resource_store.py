"""
Noteful Backend — Resource Store Unit Tests
=============================================

What:  Error translation in SqlAlchemyResourceStore.
How:   The AsyncSession is a mock whose flush/execute raise the driver
       errors SQLAlchemy surfaces, so no database is needed.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import DataError, IntegrityError, OperationalError

from app.exceptions import ConstraintViolationError, DatabaseError
from app.models import Article, Note
from app.services.resource_store import SqlAlchemyResourceStore


def failing_session(error):
    db = MagicMock()
    db.flush = AsyncMock(side_effect=error)
    db.refresh = AsyncMock()
    db.execute = AsyncMock(side_effect=error)
    return db


class TestErrorTranslation:

    @pytest.mark.asyncio
    async def test_enum_rejected_by_database_is_constraint_violation(self):
        error = DataError(
            "INSERT INTO articles ...",
            {},
            Exception('invalid input value for enum article_category: "Rant"'),
        )
        store = SqlAlchemyResourceStore(Article, failing_session(error))

        with pytest.raises(ConstraintViolationError) as excinfo:
            await store.insert({"title": "t", "style": "Rant", "content": "c"})

        assert excinfo.value.message == "Request body violates a data constraint"
        assert excinfo.value.context["error_type"] == "DataError"
        assert excinfo.value.context["table"] == "articles"

    @pytest.mark.asyncio
    async def test_value_the_column_cannot_hold_on_update(self):
        error = DataError("UPDATE notes ...", {}, Exception("invalid input for query argument"))
        store = SqlAlchemyResourceStore(Note, failing_session(error))

        with pytest.raises(ConstraintViolationError) as excinfo:
            await store.update(1, {"folder_id": "abc"})

        assert excinfo.value.context["resource_id"] == 1

    @pytest.mark.asyncio
    async def test_integrity_error_is_constraint_violation(self):
        error = IntegrityError("INSERT INTO notes ...", {}, Exception("FOREIGN KEY constraint failed"))
        store = SqlAlchemyResourceStore(Note, failing_session(error))

        with pytest.raises(ConstraintViolationError):
            await store.insert({"title": "t", "content": "c", "folder_id": 999})

    @pytest.mark.asyncio
    async def test_other_errors_are_database_errors(self):
        error = OperationalError("SELECT ...", {}, Exception("connection refused"))
        store = SqlAlchemyResourceStore(Note, failing_session(error))

        with pytest.raises(DatabaseError) as excinfo:
            await store.get_by_id(1)

        assert excinfo.value.context["operation"] == "get"
