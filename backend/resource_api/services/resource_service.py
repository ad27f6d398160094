"""
Resource API - Resource Service (Business Logic)
=================================================

What:  The five resource operations: get, create, update, soft-delete, list.
How:   Each method takes an already validated input and a ResourceStore, and
       returns an entity (or a page of entities). HTTP concerns stay in the
       routes; SQL stays in the store.
Who:   Called by the route handlers in routes/resources.py.

Operation Flow (PUT /resource/{id}):
    ┌──────────┐    ┌──────────────────┐    ┌────────────┐    ┌──────────┐
    │  Route   │───▶│ find_active_by_id│───▶│ apply patch│───▶│   save   │
    │          │    │  (row locked)    │    │ updated_at │    │ (commit) │
    └──────────┘    └──────────────────┘    └────────────┘    └──────────┘
                           │ absent
                           ▼
                     NotFoundError (404)

ResourceService keeps no state between calls; a module-level singleton is
shared by all requests. Store failures (StoreError) propagate untouched and
are never retried.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from resource_api.exceptions import NotFoundError
from resource_api.models.resource import MUTABLE_FIELDS, Resource, ResourceStatus
from resource_api.schemas.resource import ResourceCreate, ResourceUpdate
from resource_api.store.resource_store import ResourceStore

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ResourcePage:
    """One window of the listing, echoing the requested page and limit."""

    page: int
    limit: int
    resources: List[Resource]


class ResourceService:
    """
    Business logic layer for resource operations.

    Responsibilities:
        - get_resource():    Active record by id, or NotFoundError
        - create_resource(): New Active record with fresh timestamps
        - update_resource(): Partial patch of an Active record
        - delete_resource(): Soft delete (status → Deleted)
        - list_resources():  Name-filtered offset pagination over Active records
    """

    async def get_resource(self, store: ResourceStore, resource_id: int) -> Resource:
        """
        Retrieve a single Active record.

        Raises:
            NotFoundError: No record with that id, or it was soft-deleted (→ 404)
            StoreError: Query execution failed (→ 500)
        """
        resource = await store.find_active_by_id(resource_id)
        if resource is None:
            raise NotFoundError(resource="resource", resource_id=resource_id)
        return resource

    async def create_resource(self, store: ResourceStore, payload: ResourceCreate) -> Resource:
        """
        Create a new Active record.

        Provided fields are copied verbatim; omitted optional fields are null.
        `name` carries no uniqueness constraint.
        """
        now = utcnow()
        resource = Resource(
            **payload.model_dump(include=set(MUTABLE_FIELDS)),
            status=ResourceStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )
        resource = await store.insert(resource)
        logger.info("Resource %s created", resource.id)
        return resource

    async def update_resource(
        self,
        store: ResourceStore,
        resource_id: int,
        changes: ResourceUpdate,
    ) -> Resource:
        """
        Apply a partial update to an Active record.

        Only the keys present in the request body are written; everything
        else keeps its stored value. An explicit null clears a nullable
        field. `updated_at` never moves backwards.

        Raises:
            NotFoundError: Target absent or soft-deleted (→ 404)
            StoreError: Lookup or save failed (→ 500)
        """
        resource = await store.find_active_by_id(resource_id, for_update=True)
        if resource is None:
            raise NotFoundError(resource="resource", resource_id=resource_id)

        patch: Dict[str, Any] = changes.model_dump(exclude_unset=True, include=set(MUTABLE_FIELDS))
        for field_name, value in patch.items():
            setattr(resource, field_name, value)
        resource.updated_at = _advance(resource.updated_at)

        resource = await store.save(resource)
        logger.info("Resource %s updated (%s)", resource.id, ", ".join(sorted(patch)) or "no fields")
        return resource

    async def delete_resource(self, store: ResourceStore, resource_id: int) -> None:
        """
        Soft-delete an Active record.

        The row stays in the table with status=Deleted and is invisible to
        every other operation from then on. There is no undelete.
        """
        resource = await store.find_active_by_id(resource_id, for_update=True)
        if resource is None:
            raise NotFoundError(resource="resource", resource_id=resource_id)

        resource.status = ResourceStatus.DELETED
        resource.updated_at = _advance(resource.updated_at)
        await store.save(resource)
        logger.info("Resource %s soft-deleted", resource_id)

    async def list_resources(
        self,
        store: ResourceStore,
        name: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> ResourcePage:
        """
        List Active records whose name contains `name`, one page at a time.

        page=2, limit=10 returns the 11th to 20th matches in primary key
        order, or an empty list when there are fewer than 11.
        """
        offset = (page - 1) * limit
        resources = await store.list_active(name_pattern=name, offset=offset, limit=limit)
        return ResourcePage(page=page, limit=limit, resources=resources)


def _advance(previous: Optional[datetime]) -> datetime:
    now = utcnow()
    if previous is not None and previous > now:
        return previous
    return now


# ── Singleton Instance ────────────────────────────────────────────────────
resource_service = ResourceService()
