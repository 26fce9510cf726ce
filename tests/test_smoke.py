"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest

from shopblog.api.app import create_app
from shopblog.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"
    assert r.json()["tables"] == 7


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_no_root_path(client: httpx.AsyncClient) -> None:
    r = await client.get("/")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_readyz_reports_missing_tables_until_migrated() -> None:
    # prod does not create tables on startup; an empty database is not ready.
    app = create_app(settings=Settings(env="prod", database_url="sqlite+aiosqlite:///:memory:"))
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            assert (await client.get("/healthz")).status_code == 200

            r = await client.get("/readyz")
            assert r.status_code == 503
            assert r.json()["status"] == "unready"
            assert "orders" in r.json()["missing_tables"]
            assert r.headers["x-request-id"]
