"""Tests for health, root, and the uniform error envelope."""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from looncamp.api.deps import get_property_repository
from looncamp.main import app

pytestmark = pytest.mark.asyncio


class _UnreachableRepository:
    async def list_public(self):
        raise OperationalError("SELECT properties", {}, ConnectionRefusedError("db-host:5432 refused"))


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "LoonCamp Admin API is running"
    assert body["data"]["status"] == "ok"
    assert datetime.fromisoformat(body["data"]["timestamp"])


async def test_root(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "LoonCamp Admin API"


async def test_unknown_route(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found."}


async def test_wrong_method(client: AsyncClient) -> None:
    response = await client.delete("/api/health")
    assert response.status_code == 405
    assert response.json()["success"] is False


async def test_malformed_json_body(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid request."}


async def test_storage_failure_is_generic_500(client: AsyncClient) -> None:
    app.dependency_overrides[get_property_repository] = lambda: _UnreachableRepository()

    response = await client.get("/api/properties/public-list")
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error."}
    assert "db-host" not in response.text
