"""Weighted random selection over a mutable map of integer weights."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from random import Random
from typing import Generic, TypeVar

from weighted_random_sampler.bounds import WeightBounds
from weighted_random_sampler.errors import AllWeightsZeroError, UnknownKeyError
from weighted_random_sampler.table import SamplingTable

logger = logging.getLogger(__name__)

K = TypeVar("K")

WeightsInput = Mapping[K, int] | Iterable[tuple[K, int]]


class WeightedSampler(Generic[K]):
    """Picks keys at random with probability proportional to their weight.

    Weights are non-negative integers held within ``[min_weight,
    max_weight]``. They can be overwritten with :meth:`set` or nudged by one
    with :meth:`increase_weight` and :meth:`decrease_weight`, which saturate
    at the bounds instead of failing. Keys are never removed; setting a
    key's weight to zero (when ``min_weight`` allows it) stops it from being
    picked.

    The sampler is not thread-safe. Guard it with a single lock if it is
    shared between threads.

    Example:
        >>> sampler = WeightedSampler({"a": 0, "b": 0, "c": 1})
        >>> sampler.pick()
        'c'
    """

    def __init__(
        self,
        weights: WeightsInput[K],
        min_weight: int = 0,
        max_weight: int | None = None,
        rng: Random | None = None,
    ) -> None:
        self._bounds = WeightBounds(min_weight, max_weight)
        items = weights.items() if isinstance(weights, Mapping) else weights
        checked: dict[K, int] = {}
        for key, weight in items:
            checked[key] = self._bounds.check(key, weight)
        self._weights = checked
        self._rng = rng if rng is not None else Random()
        self._table: SamplingTable[K] = SamplingTable.build(self._weights)

    @classmethod
    def from_keys(
        cls,
        keys: Iterable[K],
        initial_weight: int,
        min_weight: int = 0,
        max_weight: int | None = None,
        rng: Random | None = None,
    ) -> WeightedSampler[K]:
        """Create a sampler giving every key in ``keys`` the same weight."""
        return cls(
            {key: initial_weight for key in keys},
            min_weight=min_weight,
            max_weight=max_weight,
            rng=rng,
        )

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def bounds(self) -> WeightBounds:
        return self._bounds

    @property
    def min_weight(self) -> int:
        return self._bounds.min_weight

    @property
    def max_weight(self) -> int | None:
        return self._bounds.max_weight

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def total_weight(self) -> int:
        return self._table.total

    def keys(self) -> frozenset[K]:
        return frozenset(self._weights)

    def weights(self) -> dict[K, int]:
        return dict(self._weights)

    def weight(self, key: K) -> int:
        try:
            return self._weights[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def __getitem__(self, key: K) -> int:
        return self.weight(key)

    def __contains__(self, key: object) -> bool:
        return key in self._weights

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self._table.entries)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._weights!r}, "
            f"min_weight={self.min_weight!r}, max_weight={self.max_weight!r})"
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def _commit(self, key: K, weight: int) -> None:
        self._weights[key] = weight
        self._table = SamplingTable.build(self._weights)

    def set(self, key: K, weight: int) -> None:
        """Set the weight of ``key``, adding the key if it is new.

        Raises:
            OutOfBoundsWeightError: If ``weight`` is outside the bounds.
        """
        self._commit(key, self._bounds.check(key, weight))

    def __setitem__(self, key: K, weight: int) -> None:
        self.set(key, weight)

    def increase_weight(self, key: K) -> int:
        """Add one to the weight of ``key`` unless it is at ``max_weight``.

        Returns the weight of ``key`` after the call.
        """
        weight = self.weight(key)
        if not self._bounds.can_increase(weight):
            logger.debug("Weight of %r saturated at max_weight %d", key, weight)
            return weight
        self._commit(key, weight + 1)
        return weight + 1

    def decrease_weight(self, key: K) -> int:
        """Subtract one from the weight of ``key`` unless it is at ``min_weight``.

        Returns the weight of ``key`` after the call.
        """
        weight = self.weight(key)
        if not self._bounds.can_decrease(weight):
            logger.debug("Weight of %r saturated at min_weight %d", key, weight)
            return weight
        self._commit(key, weight - 1)
        return weight - 1

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def pick(self) -> K:
        """Pick one key with probability proportional to its weight.

        Raises:
            AllWeightsZeroError: If every weight is zero.
        """
        return self._table.draw(self._rng)

    def pick_many(self, amount: int) -> list[K]:
        """Pick ``amount`` keys independently, with replacement.

        Keys are returned in draw order. Either the whole batch is returned
        or nothing is.

        Raises:
            ValueError: If ``amount`` is less than one.
            AllWeightsZeroError: If every weight is zero.
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"amount must be an int, got {amount!r}")
        if amount < 1:
            raise ValueError(f"amount must be at least 1, got {amount}")
        table = self._table
        if table.total == 0:
            raise AllWeightsZeroError()
        return [table.draw(self._rng) for _ in range(amount)]
