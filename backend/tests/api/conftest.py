"""API test fixtures — FastAPI app with lifespan run + httpx test client.

Invariants:
    - The lifespan runs before any request, so the search cache is published
    - Settings overrides go through app.dependency_overrides and are cleared after

Design Decisions:
    - lifespan_context entered explicitly: ASGITransport does not send lifespan events
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import app


@pytest.fixture
async def client():
    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as ac:
            yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Swap settings fields for one test."""
    def _override(**fields):
        settings = get_settings().model_copy(update=fields)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _override
