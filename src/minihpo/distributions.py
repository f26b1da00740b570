"""
Distribution descriptors understood by the samplers.

Only the continuous uniform distribution over ``[low, high)`` is supported.
Objective code never builds these directly: ``Trial.suggest_uniform`` passes
a plain ``{"low": ..., "high": ...}`` mapping, and the sampler validates it
through :meth:`UniformDistribution.from_mapping`.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .exceptions import DistributionValidationError

_REQUIRED_KEYS = ("low", "high")


def _check_bound(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise DistributionValidationError(
            f"'{key}' must be a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise DistributionValidationError(f"'{key}' must be finite, got {value}")
    return value


@dataclass(frozen=True)
class UniformDistribution:
    low: float
    high: float

    def __post_init__(self):
        low = _check_bound("low", self.low)
        high = _check_bound("high", self.high)
        if low > high:
            raise DistributionValidationError(
                f"'low' must be <= 'high', got low={low}, high={high}")
        if not math.isfinite(high - low):
            raise DistributionValidationError(
                f"range high - low overflows, got low={low}, high={high}")
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    @classmethod
    def from_mapping(cls, distribution: Mapping[str, Any]) -> "UniformDistribution":
        """
        Builds a distribution from a ``{"low": ..., "high": ...}`` mapping.

        Raises:
            DistributionValidationError: If a key is missing or a bound is invalid.
        """
        if isinstance(distribution, cls):
            return distribution
        if not isinstance(distribution, Mapping):
            raise DistributionValidationError(
                f"distribution must be a mapping, got {type(distribution).__name__}")
        missing = [k for k in _REQUIRED_KEYS if k not in distribution]
        if missing:
            raise DistributionValidationError(
                f"distribution is missing required key(s): {', '.join(missing)}")
        return cls(distribution["low"], distribution["high"])

    def single(self) -> bool:
        return self.low == self.high

    def contains(self, value: float) -> bool:
        if self.single():
            return value == self.low
        return self.low <= value < self.high

    def to_dict(self) -> Dict[str, float]:
        return {"low": self.low, "high": self.high}
