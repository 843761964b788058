"""
Noteful Backend — Resource Route Handlers
===========================================

What:  Builds the five CRUD endpoints for a resource definition.
How:   build_resource_router() returns an APIRouter; main.py mounts one per
       resource (folders, notes, users, articles). Handlers are thin: they
       build a ResourceController around a store bound to the request's
       session and shape the HTTP response.

Endpoints (shown for articles):
    GET    /api/articles              → 200, JSON array
    GET    /api/articles/{id}         → 200 | 404
    POST   /api/articles              → 201 + Location | 400
    PATCH  /api/articles/{id}         → 204 | 400 | 404
    DELETE /api/articles/{id}         → 204 | 404
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.resources import ResourceDefinition
from app.schemas.common import ErrorResponse
from app.services.resource_controller import ResourceController
from app.services.resource_store import SqlAlchemyResourceStore

logger = logging.getLogger(__name__)


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """Create the router exposing CRUD operations for one resource."""
    router = APIRouter(prefix=definition.collection_url, tags=[definition.label + "s"])
    response_model = definition.response_model
    label = definition.label.lower()

    def get_controller(db: AsyncSession = Depends(get_db_session)) -> ResourceController:
        return ResourceController(definition, SqlAlchemyResourceStore(definition.model, db))

    @router.get(
        "",
        response_model=List[response_model],
        summary=f"List all {label}s",
    )
    async def list_resources(
        controller: ResourceController = Depends(get_controller),
    ):
        return await controller.list_resources()

    @router.get(
        "/{resource_id}",
        response_model=response_model,
        responses={404: {"description": f"{definition.label} not found", "model": ErrorResponse}},
        summary=f"Get a single {label} by ID",
    )
    async def get_resource(
        resource_id: int,
        controller: ResourceController = Depends(get_controller),
    ):
        return await controller.get_resource(resource_id)

    @router.post(
        "",
        status_code=201,
        response_model=response_model,
        responses={400: {"description": "Missing required field", "model": ErrorResponse}},
        summary=f"Create a {label}",
        description=(
            f"Required fields: {', '.join(definition.required_fields)}. "
            "Unrecognized fields are ignored."
        ),
    )
    async def create_resource(
        response: Response,
        payload: Any = Body(default=None),
        controller: ResourceController = Depends(get_controller),
    ):
        created = await controller.create_resource(payload)
        response.headers["Location"] = definition.location(created.id)
        return created

    @router.patch(
        "/{resource_id}",
        status_code=204,
        response_class=Response,
        responses={
            400: {"description": "No updatable field supplied", "model": ErrorResponse},
            404: {"description": f"{definition.label} not found", "model": ErrorResponse},
        },
        summary=f"Partially update a {label}",
        description=(
            f"Body must contain at least one of: {', '.join(definition.updatable_fields)}. "
            "Omitted fields keep their current value."
        ),
    )
    async def update_resource(
        resource_id: int,
        payload: Any = Body(default=None),
        controller: ResourceController = Depends(get_controller),
    ):
        await controller.update_resource(resource_id, payload)
        return Response(status_code=204)

    @router.delete(
        "/{resource_id}",
        status_code=204,
        response_class=Response,
        responses={404: {"description": f"{definition.label} not found", "model": ErrorResponse}},
        summary=f"Delete a {label}",
    )
    async def delete_resource(
        resource_id: int,
        controller: ResourceController = Depends(get_controller),
    ):
        await controller.delete_resource(resource_id)
        return Response(status_code=204)

    return router
