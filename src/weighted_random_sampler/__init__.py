"""Package initialization for weighted-random-sampler.

Weighted random selection over keys with bounded, mutable integer weights.
"""

import logging

from weighted_random_sampler.bounds import WeightBounds
from weighted_random_sampler.errors import (
    AllWeightsZeroError,
    OutOfBoundsWeightError,
    UnknownKeyError,
    WeightedSamplerError,
)
from weighted_random_sampler.sampler import WeightedSampler
from weighted_random_sampler.table import SamplingTable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AllWeightsZeroError",
    "OutOfBoundsWeightError",
    "SamplingTable",
    "UnknownKeyError",
    "WeightBounds",
    "WeightedSampler",
    "WeightedSamplerError",
]
