"""Health Probe — verifies envelope, schema and identity headers over HTTP.

Tests:
    - Plain-text default, JSON envelope with json=true
    - Schema header only with json=true&get_response_schema=true
    - Identity headers always; CORS headers only when enabled
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from cruise_response.api.routes.health import HEALTHY_MESSAGE
from cruise_response.config import Settings
from cruise_response.main import create_app


async def test_health_plain_text(client):
    res = await client.get("/kafkacruisecontrol/health")
    assert res.status_code == 200
    assert res.text == HEALTHY_MESSAGE
    assert res.headers["content-type"] == "text/plain; charset=utf-8"
    assert res.headers["content-length"] == str(len(HEALTHY_MESSAGE.encode("utf-8")))


async def test_health_json_envelope(client):
    res = await client.get("/kafkacruisecontrol/health", params={"json": "true"})
    assert res.headers["content-type"] == "application/json; charset=utf-8"
    assert res.json() == {"version": 1, "message": HEALTHY_MESSAGE}
    assert "cruise-control-json-schema" not in res.headers


async def test_health_json_flag_is_case_insensitive(client):
    res = await client.get("/kafkacruisecontrol/health", params={"json": "TRUE"})
    assert res.json()["version"] == 1


async def test_health_non_true_flag_means_plain_text(client):
    res = await client.get("/kafkacruisecontrol/health", params={"json": "yes"})
    assert res.text == HEALTHY_MESSAGE


async def test_health_schema_header(client):
    res = await client.get(
        "/kafkacruisecontrol/health",
        params={"json": "true", "get_response_schema": "true"},
    )
    assert json.loads(res.headers["cruise-control-json-schema"]) == {
        "type": "object",
        "properties": {
            "version": {"type": "number"},
            "message": {"type": "string"},
        },
    }


async def test_health_schema_ignored_without_json(client):
    res = await client.get(
        "/kafkacruisecontrol/health", params={"get_response_schema": "true"},
    )
    assert "cruise-control-json-schema" not in res.headers


async def test_identity_headers(client):
    res = await client.get("/kafkacruisecontrol/health")
    assert res.headers["cruise-control-version"] == "2.5.138"
    assert res.headers["cruise-control-commit_id"] == "1f2e3d"


async def test_no_cors_headers_when_disabled(client):
    res = await client.get("/kafkacruisecontrol/health")
    assert "access-control-allow-origin" not in res.headers
    assert "access-control-expose-headers" not in res.headers
    assert "access-control-allow-credentials" not in res.headers


@pytest.fixture
async def cors_client():
    settings = Settings(
        _env_file=None,
        cors_enabled=True,
        cors_origin="https://ui.example",
        cors_expose_headers="User-Task-ID",
    )
    async with AsyncClient(
        transport=ASGITransport(app=create_app(settings)),
        base_url="http://test",
    ) as c:
        yield c


async def test_cors_headers_when_enabled(cors_client):
    res = await cors_client.get("/kafkacruisecontrol/health")
    assert res.headers["access-control-allow-origin"] == "https://ui.example"
    assert res.headers["access-control-expose-headers"] == "User-Task-ID"
    assert res.headers["access-control-allow-credentials"] == "true"
