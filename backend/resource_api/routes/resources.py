"""
Resource API - Resource Route Handlers
=======================================

What:  HTTP adaptation for the resource operations:
           GET    /resource/{id}   → 200 record
           POST   /resource        → 201 record
           PUT    /resource/{id}   → 200 record
           DELETE /resource/{id}   → 204 empty
           GET    /resources       → 200 {page, limit, resources}
How:   Each handler receives validated, typed input from FastAPI, builds a
       ResourceStore around the request's session, calls ResourceService and
       renders the result. Errors are raised, not rendered here; the global
       exception handlers in main.py map them to 400/404/500.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.resource import (
    ErrorResponse,
    ResourceCreate,
    ResourceListResponse,
    ResourceResponse,
    ResourceUpdate,
)
from resource_api.services.resource_service import resource_service
from resource_api.store.resource_store import ResourceStore
from resource_api.validation import ListResourcesQuery, ResourceId

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Resource"])

_ERRORS_400 = {400: {"description": "Invalid input", "model": ErrorResponse}}
_ERRORS_404 = {404: {"description": "Resource not found", "model": ErrorResponse}}
_ERRORS_500 = {500: {"description": "Server error", "model": ErrorResponse}}


def get_resource_store(session: AsyncSession = Depends(get_db_session)) -> ResourceStore:
    """FastAPI dependency: a record store bound to this request's session."""
    return ResourceStore(session)


@router.get(
    "/resource/{id}",
    response_model=ResourceResponse,
    responses={**_ERRORS_400, **_ERRORS_404, **_ERRORS_500},
    summary="Get details of a resource via ID",
)
async def get_resource(
    id: ResourceId,
    store: ResourceStore = Depends(get_resource_store),
) -> ResourceResponse:
    resource = await resource_service.get_resource(store, id)
    return ResourceResponse.model_validate(resource)


@router.post(
    "/resource",
    response_model=ResourceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_ERRORS_400, **_ERRORS_500},
    summary="Create a new resource",
    description=(
        "Creates an Active resource. `name` is required; `description`, "
        "`value1`..`value4` are optional and stored as null when omitted."
    ),
)
async def create_resource(
    payload: ResourceCreate,
    store: ResourceStore = Depends(get_resource_store),
) -> ResourceResponse:
    resource = await resource_service.create_resource(store, payload)
    return ResourceResponse.model_validate(resource)


@router.put(
    "/resource/{id}",
    response_model=ResourceResponse,
    responses={**_ERRORS_400, **_ERRORS_404, **_ERRORS_500},
    summary="Update resource details",
    description=(
        "Partial update: only the fields present in the body are changed. "
        "Sending null clears an optional field; `name` cannot be null."
    ),
)
async def update_resource(
    id: ResourceId,
    changes: ResourceUpdate,
    store: ResourceStore = Depends(get_resource_store),
) -> ResourceResponse:
    resource = await resource_service.update_resource(store, id, changes)
    return ResourceResponse.model_validate(resource)


@router.delete(
    "/resource/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_ERRORS_400, **_ERRORS_404, **_ERRORS_500},
    summary="Delete a resource via ID",
    description="Soft delete: the record is marked Deleted and disappears from every read.",
)
async def delete_resource(
    id: ResourceId,
    store: ResourceStore = Depends(get_resource_store),
) -> Response:
    await resource_service.delete_resource(store, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/resources",
    response_model=ResourceListResponse,
    responses={**_ERRORS_400, **_ERRORS_500},
    summary="List resources with filters",
    description=(
        "Returns Active resources whose name contains `name`, in creation "
        "order, `limit` per page. No total count is computed."
    ),
)
async def list_resources(
    query: ListResourcesQuery = Depends(ListResourcesQuery.from_request),
    store: ResourceStore = Depends(get_resource_store),
) -> ResourceListResponse:
    page = await resource_service.list_resources(
        store,
        name=query.name,
        page=query.page,
        limit=query.limit,
    )
    return ResourceListResponse(
        page=page.page,
        limit=page.limit,
        resources=[ResourceResponse.model_validate(r) for r in page.resources],
    )
