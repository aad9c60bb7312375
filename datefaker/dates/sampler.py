"""
Uniform sampling of whole-second instants inside an interval.
"""

from datetime import datetime

from ..rng.source import RandomSource
from ..utils.time import normalize_instant, shift_seconds
from .models import Interval


def sample(start: datetime, end: datetime, source: RandomSource) -> datetime:
    """
    Draw one instant uniformly from [start, end).

    The offset from start is a single draw from [0, L - 1] where L is the
    interval length in whole seconds, so end itself is never returned.
    Naive bounds are taken to already be UTC.

    Args:
        start: Inclusive lower bound
        end: Exclusive upper bound
        source: Random source consumed for exactly one draw

    Returns:
        Sampled instant

    Raises:
        InvalidIntervalError: If end is not at least one second after start
    """
    return sample_interval(Interval(normalize_instant(start), normalize_instant(end)), source)


def sample_interval(interval: Interval, source: RandomSource) -> datetime:
    """Draw one instant uniformly from an already validated interval."""
    offset = source.integer(0, interval.length_seconds - 1)
    return shift_seconds(interval.start, offset)
