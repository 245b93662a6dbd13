"""
Pytest configuration and fixtures.
"""

import os
from typing import Callable, List

import pytest

from frontend.consent.context import ConsentContext
from frontend.consent.store import ConsentStore


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""

    test_env = {
        "KINETICA_ENV": "test",
        "KINETICA_STORAGE_SECRET": "test-secret",
        "KINETICA_SENTRY_DSN": "",
    }

    for key, value in test_env.items():
        os.environ[key] = value

    yield

    for key in test_env:
        os.environ.pop(key, None)


class FakeTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.fired = True
        self.callback()


class FakeScheduler:
    """Collects one-shot timers instead of running them."""

    def __init__(self) -> None:
        self.timers: List[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer.cancel

    @property
    def pending(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def fire_all(self) -> None:
        for timer in self.pending:
            timer.fire()


class RecordingInitializers(dict):
    """Initializer table that records which categories were started."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[str] = []
        for category in ("analytics", "marketing", "preferences"):
            self[category] = self._recorder(category)

    def _recorder(self, category: str) -> Callable[[], None]:
        def initializer() -> None:
            self.calls.append(category)

        return initializer


@pytest.fixture
def storage() -> dict:
    """Browser storage stand-in."""
    return {}


@pytest.fixture
def store(storage) -> ConsentStore:
    return ConsentStore(storage)


@pytest.fixture
def initializers() -> RecordingInitializers:
    return RecordingInitializers()


@pytest.fixture
def context(store, initializers) -> ConsentContext:
    ctx = ConsentContext(store, initializers)
    ctx.initialize()
    return ctx


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()
