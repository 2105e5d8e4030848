"""API test fixtures — FastAPI app with the NotesService dependency overridden.

Invariants:
    - Every test gets a fresh NotesService (deterministic clock and ids)
    - Overrides cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from notes_app.api.dependencies import get_notes_service
from notes_app.main import app


@pytest.fixture
async def client(service):
    """FastAPI test client bound to the per-test service."""
    app.dependency_overrides[get_notes_service] = lambda: service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
