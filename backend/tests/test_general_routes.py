"""
Resource API - General Endpoint & Middleware Tests
===================================================

What we test:
    ✅ /about reports name, version and build
    ✅ /healthcheck answers without touching the database
    ✅ Every response carries a fresh X-Request-ID and an X-Response-Time
"""

import logging
import re
import uuid

import pytest

from resource_api import __version__
from resource_api.middleware.request_id import RequestIDLogFilter, request_id_var

RESPONSE_TIME = re.compile(r"^\d+\.\d{6}ms$")


def logging_record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)


class TestGeneralRoutes:

    @pytest.mark.asyncio
    async def test_about(self, test_client):
        response = await test_client.get("/about")

        assert response.status_code == 200
        assert response.json() == {
            "name": "resource-api",
            "version": __version__,
            "build": "test-build",
        }

    @pytest.mark.asyncio
    async def test_healthcheck(self, test_client):
        response = await test_client.get("/healthcheck")

        assert response.status_code == 200
        assert response.json() == {"message": "OK"}

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/nope")
        assert response.status_code == 404


class TestResponseHeaders:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/about", "/healthcheck", "/resources", "/resource/999"])
    async def test_headers_on_every_response(self, test_client, path):
        response = await test_client.get(path)

        uuid.UUID(response.headers["X-Request-ID"])
        assert RESPONSE_TIME.match(response.headers["X-Response-Time"])

    @pytest.mark.asyncio
    async def test_headers_on_validation_failure(self, test_client):
        response = await test_client.get("/resources?limit=101")

        assert response.status_code == 400
        assert "X-Request-ID" in response.headers
        assert RESPONSE_TIME.match(response.headers["X-Response-Time"])

    @pytest.mark.asyncio
    async def test_request_ids_are_unique(self, test_client):
        ids = {(await test_client.get("/healthcheck")).headers["X-Request-ID"] for _ in range(5)}
        assert len(ids) == 5

    @pytest.mark.asyncio
    async def test_client_request_id_is_replaced(self, test_client):
        response = await test_client.get("/about", headers={"X-Request-ID": "client-chosen"})
        assert response.headers["X-Request-ID"] != "client-chosen"


class TestRequestIDLogFilter:

    def test_outside_request(self):
        record = logging_record()
        assert RequestIDLogFilter().filter(record) is True
        assert record.request_id == "-"

    def test_inside_request(self):
        token = request_id_var.set("abc-123")
        try:
            record = logging_record()
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)
        assert record.request_id == "abc-123"

