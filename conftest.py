"""Test fixtures for pytest."""

import pytest


def pytest_addoption(parser):
    """Add command-line options to pytest."""
    parser.addoption(
        "--run-realtime-tests", action="store_true", default=False,
        help="run tests that sleep on the real monotonic clock"
    )

def pytest_configure(config):
    """Define realtime pytest mark."""
    config.addinivalue_line("markers", "realtime: mark test as sleeping on the real clock")

def pytest_collection_modifyitems(config, items):
    """Only run realtime tests when --run-realtime-tests is used."""
    if not config.getoption("--run-realtime-tests"):
        skip_realtime = pytest.mark.skip(reason="need --run-realtime-tests option to run")
        for item in items:
            if "realtime" in item.keywords:
                item.add_marker(skip_realtime)


class FakeClock:
    """A clock that only moves when advance() is called."""

    def __init__(self, start: float = 1000.0) -> None:
        """Start the clock at an arbitrary epoch."""
        self._now = start

    def __call__(self) -> float:
        """Read the clock."""
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        assert seconds >= 0, "clock is monotonic"
        self._now += seconds


@pytest.fixture
def fake_clock():
    """Provide a manually advanced clock for deterministic timing."""
    return FakeClock()
