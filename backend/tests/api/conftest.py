"""API test fixtures — small in-memory universe + FastAPI test client.

Invariants:
    - Every test gets a fresh 100-item view state (no order/selection leakage)
    - get_view_engine dependency overridden to use the test state
    - view_state singleton patched: health readiness reads it directly

Design Decisions:
    - httpx ASGITransport does not run the lifespan: the fixture builds the state
      the lifespan would have built
"""

import pytest
from httpx import ASGITransport, AsyncClient

import sortview.infrastructure.view_state as view_state_module
from sortview.infrastructure.view_state import ViewStateManager, get_view_engine
from sortview.main import app


@pytest.fixture
def view_state():
    return ViewStateManager(universe_size=100)


@pytest.fixture
async def client(view_state):
    """FastAPI test client with view state dependency overridden."""
    app.dependency_overrides[get_view_engine] = lambda: view_state.engine

    original_state = view_state_module.view_state
    view_state_module.view_state = view_state

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    view_state_module.view_state = original_state


@pytest.fixture
async def bare_client():
    """Test client before lifespan startup: no view state at all."""
    original_state = view_state_module.view_state
    view_state_module.view_state = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    view_state_module.view_state = original_state
