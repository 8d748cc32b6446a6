from datetime import UTC, datetime, timedelta

import pytest

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


class TickingClock:
    """Clock returning a later instant on every call."""

    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        self.calls += 1
        return value


@pytest.fixture(autouse=True)
def _clear_atom_feed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ATOM_FEED_* settings from the developer's shell out of the tests."""
    for name in (
        "ATOM_FEED_GENERATOR_NAME",
        "ATOM_FEED_GENERATOR_URI",
        "ATOM_FEED_GENERATOR_VERSION",
        "ATOM_FEED_INDENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def ticking_clock():
    return TickingClock()


@pytest.fixture
def feed_data():
    return {
        "id": "urn:feed:1",
        "title": {"value": "My Feed"},
        "authors": [{"name": "A"}],
    }


@pytest.fixture
def entry_data():
    return {
        "id": "urn:entry:1",
        "title": {"value": "Hello"},
        "content": {"value": "Hi"},
        "authors": [{"name": "A"}],
    }
