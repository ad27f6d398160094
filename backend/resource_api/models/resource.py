"""
Resource API - Resource Entity and Table Mapping
=================================================

What:  The `Resource` entity (a plain dataclass) and the `resources` table it
       is mapped onto.
How:   The table is declared explicitly with `Table(...)` and attached to the
       dataclass through SQLAlchemy's imperative mapping. The entity itself
       has no persistence behavior; only ResourceStore reads and writes it.
Who:   Built by ResourceService, persisted by ResourceStore, rendered by
       ResourceResponse, and read by Alembic through `metadata`.

Table Layout:
    Timestamp columns keep camelCase names in the database while the
    attribute names are snake_case:

        createdAt  ↔  Resource.created_at
        updatedAt  ↔  Resource.updated_at

    Indexes on createdAt, status and updatedAt support status filtering and
    time-based lookups.
"""

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    Index,
    Integer,
    String,
    Table,
    TypeDecorator,
)
from sqlalchemy.orm import registry

mapper_registry = registry()
metadata = mapper_registry.metadata


class ResourceStatus(str, enum.Enum):
    """Lifecycle state of a record. Deleted is terminal."""

    ACTIVE = "Active"
    DELETED = "Deleted"


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always comes back in UTC.

    PostgreSQL returns aware datetimes already; SQLite stores them as naive
    strings, so loaded values get UTC attached here.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


resources_table = Table(
    "resources",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(256), nullable=False),
    Column("description", String, nullable=True),
    Column("createdAt", UTCDateTime, nullable=False),
    Column("updatedAt", UTCDateTime, nullable=False),
    Column(
        "status",
        Enum(
            ResourceStatus,
            native_enum=False,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ResourceStatus.ACTIVE,
    ),
    Column("value1", String, nullable=True),
    Column("value2", Boolean, nullable=True),
    Column("value3", Integer, nullable=True),
    Column("value4", Float, nullable=True),
    Index("resources_createdat_idx", "createdAt"),
    Index("resources_status_idx", "status"),
    Index("resources_updatedat_idx", "updatedAt"),
)


@dataclass
class Resource:
    """
    A single managed record.

    Lifecycle:
        1. Created with status=Active, created_at == updated_at
        2. Mutated in place by partial updates (updated_at refreshed)
        3. Soft-deleted: status=Deleted, updated_at refreshed; never erased
    """

    name: str
    description: Optional[str] = None
    value1: Optional[str] = None
    value2: Optional[bool] = None
    value3: Optional[int] = None
    value4: Optional[float] = None
    status: ResourceStatus = ResourceStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    id: Optional[int] = None


# Fields a client may set on create/update
MUTABLE_FIELDS = ("name", "description", "value1", "value2", "value3", "value4")


mapper_registry.map_imperatively(
    Resource,
    resources_table,
    properties={
        "created_at": resources_table.c.createdAt,
        "updated_at": resources_table.c.updatedAt,
    },
)
