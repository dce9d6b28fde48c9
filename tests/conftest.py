"""Pytest configuration and fixtures for pof_client.

HTTP tests run ProofBackendClient against the simulated backend in
tests.fake_backend through httpx.ASGITransport (no network).
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from pof_client.core.config import get_settings
from pof_client.infrastructure.backend.client import ProofBackendClient
from tests.fake_backend import FakeBackendState, create_fake_backend_app

_TEST_BASE_URL = "http://backend.test"


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings are cached per process; clear around each test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_state() -> FakeBackendState:
    """Simulated backend state (commitments, proofs, jobs, injected failures)."""
    return FakeBackendState()


@pytest.fixture
async def backend_client(fake_state: FakeBackendState) -> AsyncIterator[ProofBackendClient]:
    """ProofBackendClient wired to the simulated backend app (ASGI)."""
    transport = ASGITransport(app=create_fake_backend_app(fake_state))
    async with AsyncClient(transport=transport, base_url=_TEST_BASE_URL) as http:
        yield ProofBackendClient(_TEST_BASE_URL, http_client=http)
