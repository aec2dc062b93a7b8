"""
Shared test fixtures for the paint quote backend test suite.
"""

import pytest
import structlog
from fastapi.testclient import TestClient

from paintquote.models.entities import Room
from paintquote.models.quote import Project, Quote, QuoteBuilder
from paintquote.models.settings import CalculationSettings, PricingSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer overrides out of the tests so Settings uses its defaults."""
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("DEFAULT_WALL_HEIGHT", raising=False)
    monkeypatch.delenv("DEFAULT_COATS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _configure_structlog_for_tests():
    """Configure structlog for tests using a simple, deterministic setup."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def client() -> TestClient:
    """FastAPI TestClient wrapping the main application."""
    # Clear the lru_cache so settings pick up test env vars
    from paintquote.config import get_settings

    get_settings.cache_clear()

    from paintquote.main import app

    return TestClient(app)


@pytest.fixture
def pricing() -> PricingSettings:
    return PricingSettings()


@pytest.fixture
def calculation() -> CalculationSettings:
    return CalculationSettings()


@pytest.fixture
def quote_builder() -> QuoteBuilder:
    return QuoteBuilder()


@pytest.fixture
def bedroom() -> Room:
    """12 x 10 x 8 bedroom with one door and one window."""
    return Room(
        id="room-1",
        name="Primary Bedroom",
        length=12,
        width=10,
        height=8,
        door_count=1,
        window_count=1,
    )


@pytest.fixture
def closet_room() -> Room:
    """12 x 10 x 8 room with a single-door closet and nothing else."""
    return Room(
        id="room-2",
        name="Guest Room",
        length=12,
        width=10,
        height=8,
        single_door_closets=1,
    )


@pytest.fixture
def sample_project(bedroom: Room, closet_room: Room) -> Project:
    """Two rooms on floor 1, one quote with default settings."""
    return Project(
        id="proj-1",
        client_name="Jane Client",
        rooms=[bedroom, closet_room],
        floor_heights=[8.0, 9.0],
        quotes=[Quote(id="q-1", title="Main quote")],
        active_quote_id="q-1",
    )
