"""The continuous uniform distribution."""

from __future__ import annotations

import math
import random
from typing import Optional

from probdist.errors import BadParamsError

__all__ = ["Uniform"]


def _reciprocal(x: float) -> float:
    """1 / x with IEEE semantics for a zero divisor."""
    if x == 0.0:
        return math.copysign(math.inf, x)
    return 1.0 / x


def _ln(x: float) -> float:
    """Natural log returning -inf at zero instead of raising."""
    if x == 0.0:
        return -math.inf
    return math.log(x)


class Uniform:
    """Continuous uniform distribution on ``[min, max]``."""

    __slots__ = ("_min", "_max")

    def __init__(self, min: float, max: float) -> None:
        low = float(min)
        high = float(max)
        if math.isnan(low) or math.isnan(high) or low > high:
            raise BadParamsError(
                f"uniform distribution needs min <= max, got min={low!r}, max={high!r}"
            )
        self._min = low
        self._max = high

    def __repr__(self) -> str:
        return f"Uniform(min={self._min!r}, max={self._max!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uniform):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((Uniform, self._min, self._max))

    def sample(self, rng: Optional[random.Random] = None) -> float:
        """Draw one sample from ``[min, max]``; the range must be finite."""
        if not math.isfinite(self._max - self._min):
            raise ValueError("cannot sample from a uniform distribution with an infinite range")
        source = rng if rng is not None else random
        return source.uniform(self._min, self._max)

    def cdf(self, x: float) -> float:
        """Cumulative distribution function, (x - min) / (max - min)."""
        if x <= self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return (x - self._min) / (self._max - self._min)

    def sf(self, x: float) -> float:
        """Survival function, (max - x) / (max - min)."""
        if x <= self._min:
            return 1.0
        if x >= self._max:
            return 0.0
        if math.isinf(x) and math.isinf(self._max):
            return 0.0
        if math.isinf(self._max):
            return 1.0
        return (self._max - x) / (self._max - self._min)

    def min(self) -> float:
        """Smallest value of the domain."""
        return self._min

    def max(self) -> float:
        """Largest value of the domain."""
        return self._max

    def mean(self) -> float:
        """Mean, (min + max) / 2."""
        return (self._min + self._max) / 2.0

    def variance(self) -> float:
        """Variance, (max - min)^2 / 12."""
        width = self._max - self._min
        return width * width / 12.0

    def entropy(self) -> float:
        """Differential entropy, ln(max - min)."""
        return _ln(self._max - self._min)

    def skewness(self) -> float:
        """Skewness, which is always zero."""
        return 0.0

    def median(self) -> float:
        """Median, (min + max) / 2."""
        return (self._min + self._max) / 2.0

    def mode(self) -> float:
        """Mode; every point is equally likely, so the midpoint is returned."""
        return (self._min + self._max) / 2.0

    def pdf(self, x: float) -> float:
        """Probability density at ``x``; zero outside ``[min, max]``."""
        if x < self._min or x > self._max:
            return 0.0
        return _reciprocal(self._max - self._min)

    def ln_pdf(self, x: float) -> float:
        """Natural log of the probability density at ``x``."""
        if x < self._min or x > self._max:
            return -math.inf
        return -_ln(self._max - self._min)