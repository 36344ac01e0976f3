"""Exceptions raised by the weighted random sampler.

Caller bugs (bad weights, unknown keys) subclass the built-in ``ValueError``
and ``KeyError``. Only :class:`WeightedSamplerError` and its subclasses
describe conditions a correct program is expected to handle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weighted_random_sampler.bounds import WeightBounds


class OutOfBoundsWeightError(ValueError):
    """A weight outside the sampler's configured bounds."""

    def __init__(self, key: Any, weight: int, bounds: WeightBounds) -> None:
        super().__init__(
            f"weight {weight!r} for key {key!r} is outside {bounds.describe()}"
        )
        self.key = key
        self.weight = weight
        self.bounds = bounds


class UnknownKeyError(KeyError):
    """A key that was never added to the sampler."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown key {self.key!r}"


class WeightedSamplerError(Exception):
    """Base class for recoverable sampler errors."""


class AllWeightsZeroError(WeightedSamplerError):
    """Every weight is zero, so no key can be picked."""

    def __init__(self) -> None:
        super().__init__("cannot pick: all weights are zero")
