"""
Resource API - Resource Store
==============================

What:  Record store over the `resources` table: point lookup, insert, save and
       filtered/paginated listing of Active records.
How:   Wraps one AsyncSession per request. Every write commits its own
       transaction. Any SQLAlchemy failure is logged with its cause and
       re-raised as StoreError, whose message is generic.
Who:   Constructed by the route dependency `get_resource_store`; used only by
       ResourceService.

Query plans:
    find_active_by_id:
        SELECT ... FROM resources WHERE id = :id AND status = 'Active'
        → primary key lookup
    list_active:
        SELECT ... FROM resources
        WHERE status = 'Active' [AND name LIKE '%' || :pattern || '%']
        ORDER BY id LIMIT :limit OFFSET :offset
        → resources_status_idx, primary key order
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.exceptions import StoreError
from resource_api.models.resource import Resource, ResourceStatus

logger = logging.getLogger(__name__)


class ResourceStore:
    """
    Persistence operations for Resource records.

    Soft-deleted rows stay in the table; every read here filters them out.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_active_by_id(
        self, resource_id: int, for_update: bool = False
    ) -> Optional[Resource]:
        """
        Look up an Active record by primary key.

        With `for_update=True` the row is locked (SELECT ... FOR UPDATE) until
        the next write from this store commits. Backends without row locks
        (SQLite) ignore the clause.
        """
        query = select(Resource).where(
            Resource.id == resource_id,
            Resource.status == ResourceStatus.ACTIVE,
        )
        if for_update:
            query = query.with_for_update()
        try:
            result = await self._session.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._store_error("find_active_by_id", e, resource_id=resource_id)

    async def insert(self, resource: Resource) -> Resource:
        """Persist a new record; the database assigns its id."""
        try:
            self._session.add(resource)
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._store_error("insert", e)
        logger.info("Resource %s inserted", resource.id)
        return resource

    async def save(self, resource: Resource) -> Resource:
        """Persist in-place changes to an already stored record."""
        try:
            self._session.add(resource)
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._store_error("save", e, resource_id=resource.id)
        logger.debug("Resource %s saved (status=%s)", resource.id, resource.status.value)
        return resource

    async def list_active(
        self,
        name_pattern: Optional[str],
        offset: int,
        limit: int,
    ) -> List[Resource]:
        """
        Page through Active records in primary key order.

        `name_pattern` is a substring match; `%` and `_` inside it match
        literally. An empty or missing pattern disables the filter.
        """
        query = select(Resource).where(Resource.status == ResourceStatus.ACTIVE)
        if name_pattern:
            query = query.where(Resource.name.contains(name_pattern, autoescape=True))
        query = query.order_by(Resource.id).offset(offset).limit(limit)
        try:
            result = await self._session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._store_error("list_active", e)

    async def _store_error(self, operation: str, error: SQLAlchemyError, **context) -> StoreError:
        # Cause is logged here and never reaches the client
        logger.error(
            "Store operation %s failed: %s: %s",
            operation,
            type(error).__name__,
            error,
        )
        try:
            await self._session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed %s also failed", operation, exc_info=True)
        return StoreError(
            context={"operation": operation, "error_type": type(error).__name__, **context}
        )
