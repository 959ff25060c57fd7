"""The Poisson distribution."""

from __future__ import annotations

import math
import random
from typing import Optional

from scipy.special import gammainc, gammaincc

from probdist.errors import BadParamsError

__all__ = ["Poisson", "sample_unchecked"]

_U64_MAX = 2**64 - 1
_MAX_EXACT_FACTORIAL = 170


def _ln_factorial(n: int) -> float:
    """Natural log of ``n!``."""
    if n <= 1:
        return 0.0
    if n <= _MAX_EXACT_FACTORIAL:
        return math.log(float(math.factorial(n)))
    return math.lgamma(n + 1.0)


def _check_count(x: int) -> int:
    x = int(x)
    if x < 0:
        raise ValueError(f"x must be a non-negative integer, got {x!r}")
    return x


def _ln_one_plus_exp(y: float) -> float:
    """Compute ln(1 + e^y) without overflow."""
    if y > 0.0:
        return y + math.log1p(math.exp(-y))
    return math.log1p(math.exp(y))


def sample_unchecked(rng: Optional[random.Random], lam: float) -> float:
    """Draw one sample from a Poisson distribution with rate ``lam``.

    Uses Knuth's method for ``lam < 30`` and Atkinson's rejection method PA
    otherwise.
    """
    source = rng if rng is not None else random
    if lam < 30.0:
        limit = math.exp(-lam)
        count = 0.0
        product = source.random()
        while product >= limit:
            count += 1.0
            product *= source.random()
        return count

    c = 0.767 - 3.36 / lam
    beta = math.pi / math.sqrt(3.0 * lam)
    alpha = beta * lam
    k = math.log(c) - lam - math.log(beta)
    ln_lam = math.log(lam)

    while True:
        u = source.random()
        if u == 0.0:
            continue
        x = (alpha - math.log((1.0 - u) / u)) / beta if u < 1.0 else math.inf
        n = math.floor(x + 0.5)
        if n < 0.0 or math.isinf(n):
            continue

        v = source.random()
        y = alpha - beta * x
        ln_v = math.log(v) if v > 0.0 else -math.inf
        lhs = y + ln_v - 2.0 * _ln_one_plus_exp(y)
        rhs = k + n * ln_lam - _ln_factorial(int(n))
        if lhs <= rhs:
            return float(n)


class Poisson:
    """Poisson distribution with rate ``lam``."""

    __slots__ = ("_lambda",)

    def __init__(self, lam: float) -> None:
        lam = float(lam)
        if math.isnan(lam) or lam <= 0.0:
            raise BadParamsError(f"poisson distribution needs lambda > 0, got {lam!r}")
        self._lambda = lam

    @property
    def lam(self) -> float:
        """Rate of the distribution."""
        return self._lambda

    def __repr__(self) -> str:
        return f"Poisson(lam={self._lambda!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poisson):
            return NotImplemented
        return self._lambda == other._lambda

    def __hash__(self) -> int:
        return hash((Poisson, self._lambda))

    def sample(self, rng: Optional[random.Random] = None) -> float:
        """Draw one sample, using ``rng`` or the global random source."""
        return sample_unchecked(rng, self._lambda)

    def cdf(self, x: int) -> float:
        """Cumulative distribution function at ``x``."""
        x = _check_count(x)
        return float(gammaincc(x + 1.0, self._lambda))

    def sf(self, x: int) -> float:
        """Survival function (1 - CDF) at ``x``."""
        x = _check_count(x)
        return float(gammainc(x + 1.0, self._lambda))

    def min(self) -> int:
        """Smallest value of the domain."""
        return 0

    def max(self) -> int:
        """Largest value of the domain representable as an unsigned 64-bit integer."""
        return _U64_MAX

    def mean(self) -> float:
        """Mean of the distribution."""
        return self._lambda

    def variance(self) -> float:
        """Variance of the distribution."""
        return self._lambda

    def entropy(self) -> float:
        """Approximate entropy of the distribution."""
        lam = self._lambda
        return (
            0.5 * math.log(2.0 * math.pi * math.e * lam)
            - 1.0 / (12.0 * lam)
            - 1.0 / (24.0 * lam * lam)
            - 19.0 / (360.0 * lam * lam * lam)
        )

    def skewness(self) -> float:
        """Skewness of the distribution."""
        return 1.0 / math.sqrt(self._lambda)

    def median(self) -> float:
        """Approximate median of the distribution."""
        lam = self._lambda
        return float(math.floor(lam + 1.0 / 3.0 - 0.02 / lam))

    def mode(self) -> int:
        """Mode of the distribution."""
        return math.floor(self._lambda)

    def pmf(self, x: int) -> float:
        """Probability mass at ``x``."""
        return math.exp(self.ln_pmf(x))

    def ln_pmf(self, x: int) -> float:
        """Natural log of the probability mass at ``x``."""
        x = _check_count(x)
        return -self._lambda + x * math.log(self._lambda) - _ln_factorial(x)