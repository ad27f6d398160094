"""
Resource API - Resource Store Tests
====================================

What:  Tests for ResourceStore against a real SQLite database, plus the
       error-wrapping path against a mock session.

What we test:
    ✅ insert assigns increasing ids and keeps timestamps in UTC
    ✅ find_active_by_id hides soft-deleted rows
    ✅ list_active filters by status and name, pages in id order
    ✅ SQLAlchemy failures become StoreError with a generic message
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import OperationalError

from resource_api.exceptions import StoreError
from resource_api.models.resource import Resource, ResourceStatus
from resource_api.store.resource_store import ResourceStore


def _new(name: str, **fields) -> Resource:
    now = datetime.now(timezone.utc)
    return Resource(name=name, created_at=now, updated_at=now, **fields)


class TestResourceStoreWrites:

    @pytest.mark.asyncio
    async def test_insert_assigns_ids(self, store):
        first = await store.insert(_new("first"))
        second = await store.insert(_new("second"))

        assert first.id is not None
        assert second.id > first.id
        assert first.status == ResourceStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_round_trip_through_new_session(self, store, database):
        created = await store.insert(_new("foo", value2=False, value3=7, value4=2.5))

        async with database.session_factory() as other:
            loaded = await ResourceStore(other).find_active_by_id(created.id)

        assert loaded is not None
        assert loaded.name == "foo"
        assert loaded.value2 is False
        assert loaded.value3 == 7
        assert loaded.value4 == 2.5
        assert loaded.status == ResourceStatus.ACTIVE
        assert loaded.created_at == created.created_at
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_save_persists_changes(self, store, database):
        created = await store.insert(_new("before"))
        created.name = "after"
        await store.save(created)

        async with database.session_factory() as other:
            loaded = await ResourceStore(other).find_active_by_id(created.id)

        assert loaded.name == "after"


class TestResourceStoreReads:

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, store):
        assert await store.find_active_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_find_hides_deleted(self, store):
        created = await store.insert(_new("gone"))
        created.status = ResourceStatus.DELETED
        await store.save(created)

        assert await store.find_active_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_find_for_update(self, store):
        created = await store.insert(_new("locked"))
        found = await store.find_active_by_id(created.id, for_update=True)
        assert found is not None and found.id == created.id

    @pytest.mark.asyncio
    async def test_list_excludes_deleted(self, store):
        keep = await store.insert(_new("keep"))
        drop = await store.insert(_new("drop"))
        drop.status = ResourceStatus.DELETED
        await store.save(drop)

        result = await store.list_active(name_pattern=None, offset=0, limit=10)

        assert [r.id for r in result] == [keep.id]

    @pytest.mark.asyncio
    async def test_list_name_substring_and_window(self, store):
        ids = []
        for i in range(25):
            ids.append((await store.insert(_new(f"x-abc-{i}"))).id)
            await store.insert(_new(f"other-{i}"))

        page_two = await store.list_active(name_pattern="abc", offset=10, limit=10)
        past_end = await store.list_active(name_pattern="abc", offset=30, limit=10)

        assert [r.id for r in page_two] == ids[10:20]
        assert past_end == []

    @pytest.mark.asyncio
    async def test_list_pattern_wildcards_are_literal(self, store):
        await store.insert(_new("50% off"))
        await store.insert(_new("500 off"))

        result = await store.list_active(name_pattern="50%", offset=0, limit=10)

        assert [r.name for r in result] == ["50% off"]

    @pytest.mark.asyncio
    async def test_list_empty_pattern_means_no_filter(self, store):
        await store.insert(_new("a"))
        await store.insert(_new("b"))

        result = await store.list_active(name_pattern="", offset=0, limit=10)

        assert len(result) == 2


class TestResourceStoreErrors:

    @pytest.mark.asyncio
    async def test_query_failure_becomes_store_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(StoreError) as exc_info:
            await ResourceStore(mock_db_session).find_active_by_id(1)

        assert "down" not in exc_info.value.message
        assert exc_info.value.context["operation"] == "find_active_by_id"
        assert exc_info.value.context["error_type"] == "OperationalError"
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_failure_becomes_store_error(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError("INSERT", {}, Exception("down"))

        with pytest.raises(StoreError):
            await ResourceStore(mock_db_session).insert(_new("foo"))

    @pytest.mark.asyncio
    async def test_list_failure_becomes_store_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(StoreError) as exc_info:
            await ResourceStore(mock_db_session).list_active(None, 0, 10)

        assert exc_info.value.context["operation"] == "list_active"
