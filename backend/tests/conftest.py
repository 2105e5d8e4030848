"""Root conftest — shared test configuration and deterministic fakes."""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Keep tests on development defaults regardless of the host environment
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_FORMAT", "text")

from notes_app.config import get_settings  # noqa: E402
from notes_app.services.notes_service import build_notes_service  # noqa: E402


class FakeClock:
    """Starts at a fixed instant; advances by `step` on every now() call."""

    def __init__(
        self,
        start: datetime = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(milliseconds=1),
    ):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        moment = self.current
        self.current = self.current + self.step
        return moment


class SequentialIds:
    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.issued = 0

    def new_id(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued}"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def service(clock, ids):
    """Fresh, isolated NotesService per test."""
    return build_notes_service(clock=clock, id_generator=ids)


@pytest.fixture
def settings_env(monkeypatch):
    """Set env vars for Settings and rebuild the cached instance."""
    def _apply(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    yield _apply
    get_settings.cache_clear()
