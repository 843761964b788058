"""
Noteful Backend — Resource Store (Data Access)
================================================

What:  CRUD primitives over one table, for one resource model.
How:   Thin wrapper over an AsyncSession. Each method is a single awaited
       statement; the transaction is committed or rolled back by the
       get_db_session dependency, not here.
Who:   Built per request by the routes and handed to ResourceController.

Error translation:
    IntegrityError (bad parent reference, enum/unique/NOT NULL violation)
    DataError (value the column type cannot hold, e.g. a label outside a
               native enum type, or text bound to an integer column)
        → ConstraintViolationError (400, generic message)
    Any other SQLAlchemyError
        → DatabaseError (500, generic message)
    The driver's error text goes to the log and the exception context only.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import delete, select, update
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import ConstraintViolationError, DatabaseError

logger = logging.getLogger(__name__)


class SqlAlchemyResourceStore:
    """
    Store for a single ORM model.

    Methods:
        list()                 → all rows ordered by id
        get_by_id(id)          → row or None
        insert(record)         → stored row (id and defaults populated)
        update(id, partial)    → number of rows changed
        delete(id)             → number of rows removed
    """

    def __init__(self, model: Type[Base], db: AsyncSession):
        self.model = model
        self.db = db

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    async def list(self) -> List[Base]:
        try:
            result = await self.db.execute(select(self.model).order_by(self.model.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._translate(e, "list")

    async def get_by_id(self, resource_id: int) -> Optional[Base]:
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == resource_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._translate(e, "get", resource_id)

    async def insert(self, record: Dict[str, Any]) -> Base:
        """
        Insert a row and return it as stored.

        The row is refreshed after the flush so store-assigned columns
        (id, timestamps) carry the values the database will return on
        later reads.
        """
        row = self.model(**record)
        try:
            self.db.add(row)
            await self.db.flush()
            await self.db.refresh(row)
        except SQLAlchemyError as e:
            raise self._translate(e, "insert")
        logger.debug("Inserted %s row %s", self.table_name, row.id)
        return row

    async def update(self, resource_id: int, partial: Dict[str, Any]) -> int:
        try:
            result = await self.db.execute(
                update(self.model)
                .where(self.model.id == resource_id)
                .values(**partial)
            )
        except SQLAlchemyError as e:
            raise self._translate(e, "update", resource_id)
        return result.rowcount

    async def delete(self, resource_id: int) -> int:
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.id == resource_id)
            )
        except SQLAlchemyError as e:
            raise self._translate(e, "delete", resource_id)
        return result.rowcount

    def _translate(
        self,
        error: SQLAlchemyError,
        operation: str,
        resource_id: Optional[int] = None,
    ) -> Exception:
        context = {
            "table": self.table_name,
            "operation": operation,
            "error_type": type(error).__name__,
            "detail": str(getattr(error, "orig", error)),
        }
        if resource_id is not None:
            context["resource_id"] = resource_id

        if isinstance(error, (IntegrityError, DataError)):
            logger.warning(
                "Constraint violation on %s %s: %s",
                operation, self.table_name, context["detail"],
            )
            return ConstraintViolationError(context=context)

        logger.error(
            "Database error on %s %s: %s",
            operation, self.table_name, context["detail"],
            exc_info=True,
        )
        return DatabaseError(context=context)
