"""API test fixtures — app built per test around explicit Settings.

Invariants:
    - Every test gets a fresh app; no shared settings cache
    - Extra /test/* routes exercise each error handler path
    - raise_app_exceptions=False: the catch-all handler runs in Starlette's
      ServerErrorMiddleware, which re-raises after responding
"""

import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient

from cruise_response.api.dependencies import (
    ResponseFormat, get_response_format, get_response_writer,
)
from cruise_response.config import Settings
from cruise_response.core.errors import ResourceNotFoundError, UserRequestError
from cruise_response.infrastructure.http_sink import BufferedResponseSink
from cruise_response.main import create_app
from cruise_response.services.response_writer import ResponseWriter


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        cors_enabled=False,
        service_version="2.5.138",
        commit_id="1f2e3d",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)

    @app.get("/test/user-error")
    async def user_error():
        raise UserRequestError("Broker id 'abc' is not an integer.")

    @app.get("/test/not-found")
    async def not_found():
        raise ResourceNotFoundError("User task", "abc-123")

    @app.get("/test/unexpected")
    async def unexpected():
        raise ValueError("boom")

    @app.get("/test/typed")
    async def typed(count: int):
        return {"count": count}

    @app.get("/test/body")
    async def raw_body(
        text: str,
        fmt: ResponseFormat = Depends(get_response_format),
        writer: ResponseWriter = Depends(get_response_writer),
    ):
        sink = BufferedResponseSink()
        writer.write(sink, 200, fmt.is_json, fmt.wants_schema, text)
        return sink.to_response()

    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
