"""The derived lookup table used to turn a uniform draw into a key."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from random import Random
from typing import Generic, TypeVar

from weighted_random_sampler.errors import AllWeightsZeroError

logger = logging.getLogger(__name__)

K = TypeVar("K")


@dataclass(frozen=True)
class SamplingTable(Generic[K]):
    """Snapshot of a weight map as ordered ``(key, weight)`` entries.

    Each key owns a half-open sub-interval of ``[0, total)`` whose width is
    its weight, laid out in the order of ``entries``. Keys with weight zero
    own an empty interval and can never be located.
    """

    entries: tuple[tuple[K, int], ...]
    total: int

    @classmethod
    def build(cls, weights: Mapping[K, int]) -> SamplingTable[K]:
        entries = tuple(weights.items())
        total = sum(weight for _, weight in entries)
        logger.debug("Built sampling table: %d entries, total %d", len(entries), total)
        return cls(entries, total)

    def __len__(self) -> int:
        return len(self.entries)

    def locate(self, ticket: int) -> K:
        """Return the key whose interval contains ``ticket``.

        ``ticket`` must lie in ``[0, total)``.
        """
        if not 0 <= ticket < self.total:
            raise ValueError(f"ticket {ticket} is outside [0, {self.total})")
        remaining = ticket
        for key, weight in self.entries:
            remaining -= weight
            if remaining < 0:
                return key
        raise AssertionError(f"ticket {ticket} fell past the end of the table")

    def draw(self, rng: Random) -> K:
        """Pick a key with probability proportional to its weight.

        Raises:
            AllWeightsZeroError: If the table total is zero.
        """
        if self.total == 0:
            raise AllWeightsZeroError()
        return self.locate(rng.randrange(self.total))
