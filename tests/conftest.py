"""Pytest fixtures for all tests."""

from datetime import datetime, timezone

import pytest

from composition.composer import Composer
from composition.segments import ConstantSegment, RandomSegment, TimestampSegment
from composition.units import TimestampUnit
from config import ComposerConfig
from utils.rng import SeededRandomSource
from utils.timestamp import FixedClock, to_nanos

EPOCH = datetime(2020, 1, 1, tzinfo=timezone.utc)


class ScriptedClock:
    """Clock returning a prepared sequence of instants, repeating the last one."""

    def __init__(self, readings):
        self.readings = list(readings)
        self.calls = 0

    def now_nanos(self):
        index = min(self.calls, len(self.readings) - 1)
        self.calls += 1
        return self.readings[index]


@pytest.fixture
def epoch():
    """Fixed epoch shared by timestamp tests."""
    return EPOCH


@pytest.fixture
def fixed_clock():
    """Clock frozen 90 seconds and 123456789 ns after the test epoch."""
    return FixedClock(to_nanos(EPOCH) + 90_123_456_789)


@pytest.fixture
def scripted_clock():
    """Factory for scripted clocks."""
    return ScriptedClock


@pytest.fixture
def seeded_source():
    """Deterministic random source."""
    return SeededRandomSource(seed=1234)


@pytest.fixture
def snowflake(fixed_clock, seeded_source):
    """64-bit timestamp/node/random layout on fixed collaborators."""
    return Composer([
        TimestampSegment(41, TimestampUnit.MILLISECONDS, EPOCH, clock=fixed_clock),
        ConstantSegment(10, 7),
        RandomSegment(13, source=seeded_source),
    ], container_width=64)


@pytest.fixture
def composer_config():
    """Config describing the snowflake layout."""
    return ComposerConfig(container_width=64, segments=[
        {"kind": "timestamp", "width": 41, "unit": "ms", "epoch": "2020-01-01T00:00:00+00:00"},
        {"kind": "constant", "width": 10, "value": 7},
        {"kind": "random", "width": 13},
    ])
