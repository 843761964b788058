"""
Noteful Backend — Resource Controller (Business Logic Orchestrator)
=====================================================================

What:  Runs Validator → Sanitizer → ResourceStore for every CRUD operation.
How:   Generic over a ResourceDefinition; the store is injected through the
       constructor, so each request works against its own session.
Who:   Called by the routes built in app/routes/resources.py.

Operation flow:
    list    store.list → sanitize each → list (possibly empty)
    get     store.get_by_id → None? NotFound → sanitize → resource
    create  validate_create → MissingField? 400 → sanitize → store.insert
            → sanitize → resource
    update  store.get_by_id → None? NotFound → validate_update
            → NoFieldsSupplied? 400 → sanitize → store.update
    delete  store.get_by_id → None? NotFound → store.delete

    Existence is checked BEFORE the body on update, so an unknown id is a
    404 whatever the body holds. Validation failures never reach the store.
    An id outside the INTEGER column range cannot name a row: it is a 404
    without a store lookup.

Read paths sanitize again because rows written before sanitization (or by
other writers) may still hold raw markup; sanitize() is idempotent, so
already-clean rows come back unchanged.
"""

import logging
from typing import Any, Dict, List, Protocol

from pydantic import BaseModel

from app.exceptions import ConstraintViolationError, NotFoundError, ValidationError
from app.resources import ResourceDefinition, is_valid_id
from app.services.sanitizer import sanitize_fields
from app.services.validator import (
    ValidatedPayload,
    validate_create,
    validate_update,
)

logger = logging.getLogger(__name__)


class ResourceStore(Protocol):
    """Data-access interface consumed by the controller."""

    async def list(self) -> List[Any]: ...

    async def get_by_id(self, resource_id: int) -> Any: ...

    async def insert(self, record: Dict[str, Any]) -> Any: ...

    async def update(self, resource_id: int, partial: Dict[str, Any]) -> int: ...

    async def delete(self, resource_id: int) -> int: ...


class ResourceController:
    """
    CRUD orchestration for one resource type.

    Error Handling Strategy:
        MissingField / NoFieldsSupplied → ValidationError (400)
        Non-integer parent reference    → ValidationError (400)
        Out-of-range parent reference   → ConstraintViolationError (400)
        Value outside an enumeration    → ConstraintViolationError (400)
        Absent or out-of-range id       → NotFoundError (404)
        Store errors (ConstraintViolationError, DatabaseError) propagate
        unchanged to the global handlers.
    """

    def __init__(self, definition: ResourceDefinition, store: ResourceStore):
        self.definition = definition
        self.store = store

    async def list_resources(self) -> List[BaseModel]:
        rows = await self.store.list()
        return [self._present(row) for row in rows]

    async def get_resource(self, resource_id: int) -> BaseModel:
        row = await self._require(resource_id)
        return self._present(row)

    async def create_resource(self, payload: Any) -> BaseModel:
        """
        Validate, sanitize and insert a new resource.

        Returns:
            The stored representation, including the store-assigned id
            and timestamps.

        Raises:
            ValidationError: a required field is missing, or a text field
                             is not a string
        """
        result = validate_create(
            payload,
            self.definition.required_fields,
            self.definition.allowed_fields,
        )
        fields = self._accept(result)

        row = await self.store.insert(sanitize_fields(fields, self.definition.text_fields))
        created = self._present(row)
        logger.info("Created %s %s", self.definition.label.lower(), created.id)
        return created

    async def update_resource(self, resource_id: int, payload: Any) -> None:
        """
        Merge the supplied fields into an existing resource.

        Raises:
            NotFoundError: resource_id does not exist (checked first)
            ValidationError: no updatable field in the body
        """
        await self._require(resource_id)

        result = validate_update(payload, self.definition.updatable_fields)
        fields = self._accept(result)

        affected = await self.store.update(
            resource_id, sanitize_fields(fields, self.definition.text_fields)
        )
        if affected == 0:
            # Removed between the existence check and the update
            logger.warning(
                "Update of %s %s changed no rows",
                self.definition.label.lower(), resource_id,
            )
        else:
            logger.info(
                "Updated %s %s: %s",
                self.definition.label.lower(), resource_id, ", ".join(fields),
            )

    async def delete_resource(self, resource_id: int) -> None:
        await self._require(resource_id)

        affected = await self.store.delete(resource_id)
        if affected == 0:
            logger.warning(
                "Delete of %s %s removed no rows",
                self.definition.label.lower(), resource_id,
            )
        else:
            logger.info("Deleted %s %s", self.definition.label.lower(), resource_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _require(self, resource_id: int) -> Any:
        row = None
        if is_valid_id(resource_id):
            row = await self.store.get_by_id(resource_id)
        if row is None:
            raise NotFoundError(resource=self.definition.label, resource_id=resource_id)
        return row

    def _accept(self, result) -> Dict[str, Any]:
        """Unwrap a validation result or raise the matching 400."""
        if not isinstance(result, ValidatedPayload):
            raise ValidationError(
                message=result.message,
                field=getattr(result, "name", None),
            )

        for name in self.definition.text_fields:
            value = result.fields.get(name)
            if value is not None and not isinstance(value, str):
                raise ValidationError(
                    message=f"'{name}' must be a string",
                    field=name,
                )

        for name in self.definition.reference_fields:
            value = result.fields.get(name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    message=f"'{name}' must be an integer",
                    field=name,
                )
            if not is_valid_id(value):
                # No parent row can carry this id
                raise ConstraintViolationError(context={"field": name, "value": value})

        for name, allowed in self.definition.choices.items():
            value = result.fields.get(name)
            if value is not None and value not in allowed:
                raise ConstraintViolationError(context={"field": name, "value": value})
        return dict(result.fields)

    def _present(self, row: Any) -> BaseModel:
        """Serialize a stored row with its text fields sanitized."""
        response_model = self.definition.response_model
        data = response_model.model_validate(row).model_dump()
        return response_model(**sanitize_fields(data, self.definition.text_fields))
