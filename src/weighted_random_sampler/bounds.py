"""Inclusive weight bounds shared by every key of a sampler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from weighted_random_sampler.errors import OutOfBoundsWeightError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class WeightBounds:
    """The ``[min_weight, max_weight]`` range a weight must lie in.

    ``max_weight=None`` means there is no ceiling.
    """

    min_weight: int = 0
    max_weight: int | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.min_weight):
            raise TypeError(f"min_weight must be an int, got {self.min_weight!r}")
        if self.min_weight < 0:
            raise ValueError(f"min_weight must be non-negative, got {self.min_weight}")
        if self.max_weight is None:
            return
        if not _is_int(self.max_weight):
            raise TypeError(f"max_weight must be an int, got {self.max_weight!r}")
        if self.max_weight < self.min_weight:
            raise ValueError(
                f"max_weight {self.max_weight} is below min_weight {self.min_weight}"
            )

    def describe(self) -> str:
        upper = "inf" if self.max_weight is None else str(self.max_weight)
        return f"[{self.min_weight}, {upper}]"

    def contains(self, weight: int) -> bool:
        if weight < self.min_weight:
            return False
        return self.max_weight is None or weight <= self.max_weight

    def check(self, key: Any, weight: int) -> int:
        """Return ``weight`` unchanged if it is a valid weight for ``key``.

        Raises:
            TypeError: If ``weight`` is not an int.
            OutOfBoundsWeightError: If ``weight`` is outside the bounds.
        """
        if not _is_int(weight):
            raise TypeError(f"weight for key {key!r} must be an int, got {weight!r}")
        if not self.contains(weight):
            raise OutOfBoundsWeightError(key, weight, self)
        return weight

    def can_increase(self, weight: int) -> bool:
        return self.max_weight is None or weight + 1 <= self.max_weight

    def can_decrease(self, weight: int) -> bool:
        # min_weight is never negative, so this also stops at zero.
        return weight - 1 >= self.min_weight
