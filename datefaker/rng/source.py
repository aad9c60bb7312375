"""
Random number source for date generation.

Every sampling and table pick draws from a RandomSource passed in by the
caller. SeededRandomSource is the default implementation; tests substitute
their own object exposing the same ``integer`` method.

Thread safety:
- SeededRandomSource serializes draws with a lock, so each call consumes a
  private slice of the underlying stream.
"""

import random
import threading
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform integer source with inclusive bounds."""

    def integer(self, minimum: int, maximum: int) -> int:
        """Return an integer N such that minimum <= N <= maximum."""
        ...


class SeededRandomSource:
    """
    Lock-guarded wrapper around ``random.Random``.

    Args:
        seed: Optional seed for deterministic sequences
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the stream from a new seed."""
        with self._lock:
            self._seed = seed
            self._rng.seed(seed)

    def integer(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise ValueError(f"Empty integer range [{minimum}, {maximum}]")

        with self._lock:
            return self._rng.randint(minimum, maximum)


def random_element(source: RandomSource, table: Sequence[T]) -> T:
    """
    Pick one entry of a fixed table uniformly.

    Raises:
        ValueError: If the table is empty
    """
    if not table:
        raise ValueError("Cannot pick from an empty table")

    return table[source.integer(0, len(table) - 1)]
