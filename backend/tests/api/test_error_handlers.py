"""Global error handlers — envelope shape for domain, validation and unexpected errors.

Invariants:
    - ZooError keeps its own status and code
    - Unexpected exceptions → 500 INTERNAL_ERROR, exception text never in the body

Design Decisions:
    - Fresh FastAPI app per test: failing routes never leak into the real app
    - raise_app_exceptions=False: Starlette re-raises after the 500 response is sent
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.error_handlers import register_error_handlers
from app.core.errors import DescriptorSourceError, ErrorContext, InvalidDescriptorError


@pytest.fixture
def failing_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string leaked")

    @app.get("/invalid")
    async def invalid():
        raise InvalidDescriptorError(
            "Descriptor 'heap' has an empty name", "name",
            ErrorContext(descriptor_id="heap"),
        )

    @app.get("/source")
    async def source():
        raise DescriptorSourceError("No such file or directory", "/srv/zoo.json")

    return app


async def _get(app: FastAPI, path: str):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        return await ac.get(path)


async def test_unexpected_exception_returns_500_without_details(failing_app):
    res = await _get(failing_app, "/boom")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert error["severity"] == "critical"
    assert "secret connection string" not in res.text
    assert "RuntimeError" not in res.text


async def test_domain_error_keeps_status_and_code(failing_app):
    res = await _get(failing_app, "/invalid")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_DESCRIPTOR"
    assert error["context"]["descriptor_id"] == "heap"


async def test_source_error_is_500_with_its_own_code(failing_app):
    res = await _get(failing_app, "/source")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DESCRIPTOR_SOURCE_ERROR"
