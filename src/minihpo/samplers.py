"""
Samplers turn a distribution descriptor into a concrete parameter value.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

import numpy as np

from .distributions import UniformDistribution

logger = logging.getLogger(__name__)

DistributionLike = Union[UniformDistribution, Mapping[str, Any]]


class BaseSampler(ABC):
    """
    Abstract base class for all samplers.

    A sampler owns its random state. The study and every trial it creates
    share one sampler instance, so each draw advances the same sequence.
    """

    @abstractmethod
    def sample_independent(self, distribution: DistributionLike) -> float:
        """
        Draws one value from ``distribution``.

        Args:
            distribution: A ``{"low": ..., "high": ...}`` mapping or a
                :class:`UniformDistribution`.

        Returns:
            The sampled value.
        """
        pass


class RandomSampler(BaseSampler):
    """
    A sampler that draws every parameter independently and uniformly at random.

    It ignores the parameter name and the history of the study, which makes it
    a baseline rather than a search strategy.

    Args:
        seed: Any non-negative integer (64-bit seeds are fine). ``None`` seeds
            from OS entropy.
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Resets the generator as if the sampler had been built with ``seed``."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def sample_independent(self, distribution: DistributionLike) -> float:
        dist = UniformDistribution.from_mapping(distribution)
        value = float(self._rng.uniform(dist.low, dist.high))
        if dist.single():
            return dist.low
        # uniform() can round up to `high`; keep the interval half-open
        if value >= dist.high:
            value = float(np.nextafter(dist.high, dist.low))
        logger.debug("Sampled %s from [%s, %s)", value, dist.low, dist.high)
        return value
