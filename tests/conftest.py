"""Shared fixtures."""

import pytest

from tally.core.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for var in ("TALLY_LOG_LEVEL", "TALLY_STRICT", "TALLY_CHUNK_SIZE", "TALLY_LOGS_DIR"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def lenient(monkeypatch):
    """Apply negative deltas and weights as given."""
    monkeypatch.setenv("TALLY_STRICT", "0")
    reset_config()


class EventLog:
    """Records change notifications."""

    def __init__(self):
        self.events = []

    def __call__(self, name, completed, tracker):
        self.events.append((name, completed, tracker))

    def __len__(self):
        return len(self.events)

    @property
    def names(self):
        return [name for name, _, _ in self.events]

    @property
    def last(self):
        return self.events[-1]


@pytest.fixture
def events():
    return EventLog()
