"""Pytest fixtures for all tests."""

import io
import json

import pytest

import internal.logging as logging_module
from config import SimulationConfig
from internal.logging import LogLevel, StructuredLogger
from simulation.engine import SimulationEngine
from simulation.topology import Dimensions


class FixedRandom:
    """Random source that always draws the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def dims():
    """A 5x4 grid."""
    return Dimensions(width=5, height=4)


@pytest.fixture
def blinker():
    """Horizontal blinker on a 5 wide, 3 high grid."""
    return SimulationEngine.load([
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
    ])


@pytest.fixture
def fixed_random():
    """Factory for constant random sources."""
    return FixedRandom


@pytest.fixture
def sim_config():
    """Create test simulation config."""
    return SimulationConfig(width=6, height=4, tick_interval=0, clear_screen=True, log_every=0)


@pytest.fixture
def log_stream(monkeypatch):
    """Route the process logger into a buffer at DEBUG level."""
    monkeypatch.setattr(logging_module, "_logger", None)
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    return stream


@pytest.fixture
def log_records(log_stream):
    """Callable returning the JSON records logged so far."""
    def read():
        return [json.loads(line) for line in log_stream.getvalue().splitlines() if line]
    return read
