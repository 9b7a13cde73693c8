"""
Pytest configuration and shared fixtures for the Lembrancas test suite.

Provides:
- Frozen clock for deterministic dates
- A recording downstream ASGI app for middleware tests
- Habit store and FastAPI test clients
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from lembrancas.api.server import create_app
from lembrancas.habits.store import HabitStore


# =============================================================================
# Time Freezing
# =============================================================================

class FrozenClock:
    """Mock clock for deterministic date-based tests."""

    def __init__(self, frozen_time: datetime):
        self._time = frozen_time

    def __call__(self) -> datetime:
        return self._time

    def advance(self, days: float = 0, hours: float = 0):
        """Advance the frozen time."""
        self._time += timedelta(days=days, hours=hours)
        return self._time

    @property
    def now(self) -> datetime:
        return self._time


@pytest.fixture
def frozen_time():
    """Fixture providing a frozen time in the afternoon of 2025-11-17 UTC."""
    return FrozenClock(datetime(2025, 11, 17, 15, 30, 0, tzinfo=timezone.utc))


# =============================================================================
# Downstream ASGI App
# =============================================================================

class RecordingApp:
    """
    ASGI app standing in for the wrapped handler.

    Records every scope it receives and answers with a fixed text response
    carrying a custom header.
    """

    def __init__(self, status_code: int = 200, body: str = "downstream", headers=None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {"X-Downstream": "yes"}
        self.calls: List[Dict[str, Any]] = []

    async def __call__(self, scope, receive, send):
        self.calls.append(scope)
        response = PlainTextResponse(self.body, status_code=self.status_code, headers=self.headers)
        await response(scope, receive, send)


class FailingApp:
    """ASGI app whose handler raises."""

    def __init__(self):
        self.calls = 0

    async def __call__(self, scope, receive, send):
        self.calls += 1
        raise RuntimeError("downstream failure")


@pytest.fixture
def downstream_app():
    return RecordingApp()


@pytest.fixture
def make_downstream_app():
    """Factory for downstream apps with a custom status, body or headers."""
    return RecordingApp


@pytest.fixture
def failing_app():
    return FailingApp()


# =============================================================================
# Habits API
# =============================================================================

@pytest.fixture
def habit_store(frozen_time):
    """Empty store driven by the frozen clock."""
    return HabitStore(clock=frozen_time)


@pytest.fixture
def cors_config():
    """Mutable configuration lookup injected into the middleware."""
    return {}


@pytest.fixture
def api_client(habit_store, cors_config):
    """TestClient for the full application."""
    app = create_app(store=habit_store, config=cors_config)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_habit_payload():
    return {
        "name": "Drink water",
        "description": "Eight glasses",
        "frequency": "daily",
        "color": "#4CAF50",
        "category": "health",
    }
