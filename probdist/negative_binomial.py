"""The negative binomial distribution."""

from __future__ import annotations

import math
import random
from typing import Optional

from scipy.special import betainc

from probdist.errors import BadParamsError
from probdist.poisson import sample_unchecked as _poisson_sample

__all__ = ["NegativeBinomial"]

_U64_MAX = 2**64 - 1


def _div(a: float, b: float) -> float:
    """Floating point division with IEEE semantics for a zero divisor."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _ln(x: float) -> float:
    """Natural log returning -inf at zero instead of raising."""
    if x == 0.0:
        return -math.inf
    return math.log(x)


def _ln_1p(x: float) -> float:
    """log(1 + x) returning -inf at x == -1 instead of raising."""
    if x == -1.0:
        return -math.inf
    return math.log1p(x)


def _ln_gamma(x: float) -> float:
    """Log-gamma returning +inf at the poles instead of raising."""
    try:
        return math.lgamma(x)
    except ValueError:
        return math.inf


def _check_count(x: int) -> int:
    x = int(x)
    if x < 0:
        raise ValueError(f"x must be a non-negative integer, got {x!r}")
    return x


class NegativeBinomial:
    """Negative binomial distribution: failures before ``r`` successes.

    ``p`` is the probability of success of a single Bernoulli trial. ``r``
    may be any non-negative real number.
    """

    __slots__ = ("_r", "_p")

    def __init__(self, r: float, p: float) -> None:
        r = float(r)
        p = float(p)
        if math.isnan(p) or p < 0.0 or p > 1.0 or math.isnan(r) or r < 0.0:
            raise BadParamsError(
                f"negative binomial needs r >= 0 and 0 <= p <= 1, got r={r!r}, p={p!r}"
            )
        self._r = r
        self._p = p

    @property
    def r(self) -> float:
        """Number of successes."""
        return self._r

    @property
    def p(self) -> float:
        """Probability of success of a single trial."""
        return self._p

    def __repr__(self) -> str:
        return f"NegativeBinomial(r={self._r!r}, p={self._p!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NegativeBinomial):
            return NotImplemented
        return self._r == other._r and self._p == other._p

    def __hash__(self) -> int:
        return hash((NegativeBinomial, self._r, self._p))

    def sample(self, rng: Optional[random.Random] = None) -> int:
        """Draw one sample as a gamma-mixed Poisson variate."""
        source = rng if rng is not None else random
        if self._r == 0.0 or self._p == 1.0:
            return 0
        if self._p == 0.0:
            return _U64_MAX
        lam = source.gammavariate(self._r, (1.0 - self._p) / self._p)
        value = _poisson_sample(source, lam)
        if math.isinf(value):
            return _U64_MAX
        return min(int(math.floor(value)), _U64_MAX)

    def cdf(self, x: int) -> float:
        """Cumulative distribution function, I_p(r, x + 1)."""
        x = _check_count(x)
        return float(betainc(self._r, x + 1.0, self._p))

    def sf(self, x: int) -> float:
        """Survival function, I_(1-p)(x + 1, r)."""
        x = _check_count(x)
        return float(betainc(x + 1.0, self._r, 1.0 - self._p))

    def min(self) -> int:
        """Smallest value of the domain."""
        return 0

    def max(self) -> int:
        """Largest value of the domain representable as an unsigned 64-bit integer."""
        return _U64_MAX

    def mean(self) -> float:
        """Mean, r (1 - p) / p."""
        return _div(self._r * (1.0 - self._p), self._p)

    def variance(self) -> float:
        """Variance, r (1 - p) / p^2."""
        return _div(self._r * (1.0 - self._p), self._p * self._p)

    def skewness(self) -> float:
        """Skewness, (2 - p) / sqrt(r (1 - p))."""
        return _div(2.0 - self._p, math.sqrt(self._r * (1.0 - self._p)))

    def mode(self) -> float:
        """Mode, floor((r - 1)(1 - p) / p) for r > 1 and 0 otherwise."""
        if self._r > 1.0:
            return float(math.floor(_div((self._r - 1.0) * (1.0 - self._p), self._p)))
        return 0.0

    def pmf(self, x: int) -> float:
        """Probability mass at ``x``."""
        return math.exp(self.ln_pmf(x))

    def ln_pmf(self, x: int) -> float:
        """Natural log of the probability mass at ``x``."""
        k = float(_check_count(x))
        r = self._r
        return (
            _ln_gamma(r + k)
            - _ln_gamma(r)
            - _ln_gamma(k + 1.0)
            + r * _ln(self._p)
            + k * _ln_1p(-self._p)
        )