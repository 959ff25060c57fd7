"""The Pareto distribution."""

from __future__ import annotations

import math
import random
from typing import Optional

from probdist.errors import BadParamsError

__all__ = ["Pareto"]


def _pow(base: float, exponent: float) -> float:
    """Power with IEEE overflow to infinity instead of raising."""
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def _ln(x: float) -> float:
    """Natural log returning -inf at zero and +inf at infinity."""
    if x == 0.0:
        return -math.inf
    return math.log(x)


class Pareto:
    """Pareto distribution with scale ``x_m`` and shape ``alpha``."""

    __slots__ = ("_scale", "_shape")

    def __init__(self, scale: float, shape: float) -> None:
        scale = float(scale)
        shape = float(shape)
        if math.isnan(scale) or math.isnan(shape) or scale <= 0.0 or shape <= 0.0:
            raise BadParamsError(
                f"pareto distribution needs scale > 0 and shape > 0, "
                f"got scale={scale!r}, shape={shape!r}"
            )
        self._scale = scale
        self._shape = shape

    @property
    def scale(self) -> float:
        """Scale ``x_m`` of the distribution."""
        return self._scale

    @property
    def shape(self) -> float:
        """Shape ``alpha`` of the distribution."""
        return self._shape

    def __repr__(self) -> str:
        return f"Pareto(scale={self._scale!r}, shape={self._shape!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pareto):
            return NotImplemented
        return self._scale == other._scale and self._shape == other._shape

    def __hash__(self) -> int:
        return hash((Pareto, self._scale, self._shape))

    def sample(self, rng: Optional[random.Random] = None) -> float:
        """Draw one sample by inverse transform sampling."""
        source = rng if rng is not None else random
        u = 1.0 - source.random()  # uniform on (0, 1]
        return self._scale * _pow(u, -1.0 / self._shape)

    def cdf(self, x: float) -> float:
        """Cumulative distribution function, 1 - (x_m / x)^alpha for x >= x_m."""
        if x < self._scale:
            return 0.0
        return 1.0 - _pow(self._scale / x, self._shape)

    def sf(self, x: float) -> float:
        """Survival function, (x_m / x)^alpha for x >= x_m."""
        if x < self._scale:
            return 1.0
        return _pow(self._scale / x, self._shape)

    def min(self) -> float:
        """Smallest value of the domain, the scale."""
        return self._scale

    def max(self) -> float:
        """Largest value of the domain."""
        return math.inf

    def mean(self) -> Optional[float]:
        """Mean, or None when the shape is at most 1."""
        if self._shape <= 1.0:
            return None
        return (self._shape * self._scale) / (self._shape - 1.0)

    def variance(self) -> Optional[float]:
        """Variance, or None when the shape is at most 2."""
        if self._shape <= 2.0:
            return None
        a = self._scale / (self._shape - 1.0)
        return a * a * self._shape / (self._shape - 2.0)

    def entropy(self) -> float:
        """Differential entropy, ln(alpha / x_m) - 1 / alpha - 1."""
        return _ln(self._shape) - _ln(self._scale) - (1.0 / self._shape) - 1.0

    def skewness(self) -> Optional[float]:
        """Skewness, or None when the shape is at most 3."""
        shape = self._shape
        if shape <= 3.0:
            return None
        return (2.0 * (shape + 1.0) / (shape - 3.0)) * math.sqrt((shape - 2.0) / shape)

    def median(self) -> float:
        """Median, x_m * 2^(1 / alpha)."""
        return self._scale * _pow(2.0, 1.0 / self._shape)

    def mode(self) -> float:
        """Mode, equal to the scale."""
        return self._scale

    def pdf(self, x: float) -> float:
        """Probability density at ``x``."""
        if x < self._scale:
            return 0.0
        return (self._shape * _pow(self._scale, self._shape)) / _pow(x, self._shape + 1.0)

    def ln_pdf(self, x: float) -> float:
        """Natural log of the probability density at ``x``."""
        if x < self._scale:
            return -math.inf
        return (
            _ln(self._shape)
            + self._shape * _ln(self._scale)
            - (self._shape + 1.0) * _ln(x)
        )