"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone

from datefaker.generator import DateGenerator
from datefaker.rng.source import SeededRandomSource

FIXED_NOW = datetime(2024, 6, 15, 12, 30, 45, tzinfo=timezone.utc)


class BoundarySource:
    """Random source that always answers with one end of the requested range."""

    def __init__(self, pick_max: bool = False):
        self.pick_max = pick_max
        self.calls = []

    def integer(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        return maximum if self.pick_max else minimum


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed "now" snapshot for deterministic interval bounds."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Clock callable returning the fixed snapshot."""
    return lambda: FIXED_NOW


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    """Seeded source for reproducible draws."""
    return SeededRandomSource(seed=1234)


@pytest.fixture
def min_source() -> BoundarySource:
    """Source that always draws the lowest value of a range."""
    return BoundarySource(pick_max=False)


@pytest.fixture
def max_source() -> BoundarySource:
    """Source that always draws the highest value of a range."""
    return BoundarySource(pick_max=True)


@pytest.fixture
def generator(seeded_source, fixed_clock) -> DateGenerator:
    """Generator with a seeded source and a fixed clock."""
    return DateGenerator(source=seeded_source, clock=fixed_clock)
