"""The normal (Gaussian) distribution."""

from __future__ import annotations

import math
import random
from typing import Optional

from scipy.special import erfcinv

from probdist.errors import BadParamsError

SQRT_2PI = 2.5066282746310005024157652848110452530069867406099
LN_SQRT_2PI = 0.91893853320467274178032973640561763986139747363778
LN_SQRT_2PIE = 1.4189385332046727417803297364056176398613974736378

__all__ = [
    "Normal",
    "cdf_unchecked",
    "sf_unchecked",
    "pdf_unchecked",
    "ln_pdf_unchecked",
    "sample_unchecked",
]


def cdf_unchecked(x: float, mean: float, std_dev: float) -> float:
    """CDF of a normal distribution at ``x`` without validating parameters."""
    return 0.5 * math.erfc((mean - x) / (std_dev * math.sqrt(2.0)))


def sf_unchecked(x: float, mean: float, std_dev: float) -> float:
    """Survival function of a normal distribution at ``x`` without validation."""
    return 0.5 * math.erfc((x - mean) / (std_dev * math.sqrt(2.0)))


def pdf_unchecked(x: float, mean: float, std_dev: float) -> float:
    """Density of a normal distribution at ``x`` without validation."""
    d = (x - mean) / std_dev
    return math.exp(-0.5 * d * d) / (SQRT_2PI * std_dev)


def ln_pdf_unchecked(x: float, mean: float, std_dev: float) -> float:
    """Log density of a normal distribution at ``x`` without validation."""
    d = (x - mean) / std_dev
    return (-0.5 * d * d) - LN_SQRT_2PI - math.log(std_dev)


def sample_unchecked(rng: Optional[random.Random], mean: float, std_dev: float) -> float:
    """Draw one sample from a normal distribution using ``rng``."""
    source = rng if rng is not None else random
    return mean + std_dev * source.gauss(0.0, 1.0)


class Normal:
    """Normal distribution with a given mean and standard deviation."""

    __slots__ = ("_mean", "_std_dev")

    def __init__(self, mean: float, std_dev: float) -> None:
        mean = float(mean)
        std_dev = float(std_dev)
        if math.isnan(mean) or math.isnan(std_dev) or std_dev <= 0.0:
            raise BadParamsError(
                f"normal distribution needs a number mean and std_dev > 0, "
                f"got mean={mean!r}, std_dev={std_dev!r}"
            )
        self._mean = mean
        self._std_dev = std_dev

    def __repr__(self) -> str:
        return f"Normal(mean={self._mean!r}, std_dev={self._std_dev!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Normal):
            return NotImplemented
        return self._mean == other._mean and self._std_dev == other._std_dev

    def __hash__(self) -> int:
        return hash((Normal, self._mean, self._std_dev))

    def sample(self, rng: Optional[random.Random] = None) -> float:
        """Draw one sample, using ``rng`` or the global random source."""
        return sample_unchecked(rng, self._mean, self._std_dev)

    def cdf(self, x: float) -> float:
        """Cumulative distribution function at ``x``."""
        return cdf_unchecked(x, self._mean, self._std_dev)

    def sf(self, x: float) -> float:
        """Survival function (1 - CDF) at ``x``."""
        return sf_unchecked(x, self._mean, self._std_dev)

    def inverse_cdf(self, x: float) -> float:
        """Inverse of the CDF; ``x`` must lie in [0, 1]."""
        if not 0.0 <= x <= 1.0:
            raise ValueError("x must be in [0, 1]")
        return self._mean - self._std_dev * math.sqrt(2.0) * float(erfcinv(2.0 * x))

    def min(self) -> float:
        """Smallest value of the domain."""
        return -math.inf

    def max(self) -> float:
        """Largest value of the domain."""
        return math.inf

    def mean(self) -> float:
        """Mean of the distribution."""
        return self._mean

    def variance(self) -> float:
        """Variance of the distribution."""
        return self._std_dev * self._std_dev

    def std_dev(self) -> float:
        """Standard deviation of the distribution."""
        return self._std_dev

    def entropy(self) -> float:
        """Differential entropy of the distribution."""
        return math.log(self._std_dev) + LN_SQRT_2PIE

    def skewness(self) -> float:
        """Skewness, which is always zero."""
        return 0.0

    def median(self) -> float:
        """Median, equal to the mean."""
        return self._mean

    def mode(self) -> float:
        """Mode, equal to the mean."""
        return self._mean

    def pdf(self, x: float) -> float:
        """Probability density at ``x``."""
        return pdf_unchecked(x, self._mean, self._std_dev)

    def ln_pdf(self, x: float) -> float:
        """Natural log of the probability density at ``x``."""
        return ln_pdf_unchecked(x, self._mean, self._std_dev)