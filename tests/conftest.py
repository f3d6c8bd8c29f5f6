"""Shared test fixtures for daybook."""

import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from loguru import logger

from daybook.core.config import reset_config
from daybook.journal import LocalJournalStore


class FakeClock:
    """Callable clock that returns a fixed moment until advanced."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> datetime:
        self.moment += timedelta(**kwargs)
        return self.moment


@pytest.fixture(autouse=True)
def _reset_state():
    """Reset the config singleton and loguru sinks between tests."""
    reset_config()
    yield
    reset_config()
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def root(tmp_dir):
    """Journal root inside the temp dir. Not created up front."""
    return Path(tmp_dir) / "entries"


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 7, 5, 10, 30, 0))


@pytest.fixture
def store(root, clock):
    return LocalJournalStore(root, clock=clock)


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
