import math
import random

import pytest

from probdist.errors import BadParamsError
from probdist.negative_binomial import NegativeBinomial

U64_MAX = 2**64 - 1


def assert_almost(expected, actual, acc):
    assert abs(expected - actual) <= acc, (expected, actual)


def assert_same_or_nan(expected, actual):
    if math.isnan(expected):
        assert math.isnan(actual)
    else:
        assert expected == actual


@pytest.mark.parametrize("r,p", [(0.0, 0.0), (0.3, 0.4), (1.0, 0.3)])
def test_create(r, p):
    dist = NegativeBinomial(r, p)
    assert dist.p == p
    assert dist.r == r


@pytest.mark.parametrize(
    "r,p", [(math.nan, 1.0), (0.0, math.nan), (-1.0, 1.0), (2.0, 2.0)]
)
def test_bad_create(r, p):
    with pytest.raises(BadParamsError):
        NegativeBinomial(r, p)


def test_bad_create_is_value_error():
    with pytest.raises(ValueError):
        NegativeBinomial(-0.5, 5.0)


def test_doc_example():
    d = NegativeBinomial(4.0, 0.5)
    assert d.mean() == 4.0
    assert_almost(0.0625, d.pmf(0), 1e-8)
    assert_almost(0.15625, d.pmf(3), 1e-8)


def test_mean():
    assert NegativeBinomial(4.0, 0.0).mean() == math.inf
    assert_almost(7.0, NegativeBinomial(3.0, 0.3).mean(), 1e-15)
    assert NegativeBinomial(2.0, 1.0).mean() == 0.0


def test_variance():
    assert NegativeBinomial(4.0, 0.0).variance() == math.inf
    assert_almost(23.333333333333, NegativeBinomial(3.0, 0.3).variance(), 1e-12)
    assert NegativeBinomial(2.0, 1.0).variance() == 0.0


def test_skewness():
    assert NegativeBinomial(0.0, 0.0).skewness() == math.inf
    assert_almost(6.425396041, NegativeBinomial(0.1, 0.3).skewness(), 1e-9)
    assert NegativeBinomial(1.0, 1.0).skewness() == math.inf


@pytest.mark.parametrize(
    "r,p,expected",
    [(0.0, 0.0, 0.0), (0.3, 0.0, 0.0), (1.0, 1.0, 0.0), (10.0, 0.01, 891.0)],
)
def test_mode(r, p, expected):
    assert NegativeBinomial(r, p).mode() == expected


def test_min_max():
    assert NegativeBinomial(1.0, 0.5).min() == 0
    assert NegativeBinomial(1.0, 0.3).max() == U64_MAX


@pytest.mark.parametrize(
    "r,p,x,expected,acc",
    [
        (4.0, 0.5, 0, 0.0625, 1e-8),
        (4.0, 0.5, 3, 0.15625, 1e-8),
        (3.0, 0.2, 0, 0.008, 1e-15),
        (3.0, 0.2, 1, 0.0192, 1e-15),
        (3.0, 0.2, 3, 0.04096, 1e-15),
        (10.0, 0.2, 0, 1.024e-07, 1e-07),
        (10.0, 0.2, 1, 8.192e-07, 1e-07),
        (10.0, 0.2, 10, 0.001015706852, 1e-07),
        (1.0, 0.3, 0, 0.3, 1e-15),
        (1.0, 0.3, 1, 0.21, 1e-15),
        (3.0, 0.3, 0, 0.027, 1e-15),
    ],
)
def test_pmf_almost(r, p, x, expected, acc):
    assert_almost(expected, NegativeBinomial(r, p).pmf(x), acc)


@pytest.mark.parametrize(
    "r,p,x,expected",
    [
        (1.0, 0.0, 0, 0.0),
        (1.0, 0.0, 1, 0.0),
        (0.3, 1.0, 1, 0.0),
        (0.3, 1.0, 3, 0.0),
        (0.3, 1.0, 0, math.nan),
        (0.3, 1.0, 10, 0.0),
        (1.0, 1.0, 0, math.nan),
        (1.0, 1.0, 1, 0.0),
        (3.0, 1.0, 0, math.nan),
        (3.0, 1.0, 1, 0.0),
        (3.0, 1.0, 3, 0.0),
        (10.0, 1.0, 0, math.nan),
        (10.0, 1.0, 1, 0.0),
        (10.0, 1.0, 10, 0.0),
    ],
)
def test_pmf_exact(r, p, x, expected):
    assert_same_or_nan(expected, NegativeBinomial(r, p).pmf(x))


@pytest.mark.parametrize(
    "r,p,x,expected",
    [
        (3.0, 0.2, 0, -4.828313737),
        (3.0, 0.2, 1, -3.952845),
        (3.0, 0.2, 3, -3.195159298),
        (10.0, 0.2, 0, -16.09437912),
        (10.0, 0.2, 1, -14.01493758),
        (10.0, 0.2, 10, -6.892170503),
        (1.0, 0.3, 0, -1.203972804),
        (1.0, 0.3, 1, -1.560647748),
        (3.0, 0.3, 0, -3.611918413),
    ],
)
def test_ln_pmf_almost(r, p, x, expected):
    assert_almost(expected, NegativeBinomial(r, p).ln_pmf(x), 1e-8)


@pytest.mark.parametrize(
    "r,p,x,expected",
    [
        (1.0, 0.0, 0, -math.inf),
        (1.0, 0.0, 1, -math.inf),
        (0.3, 1.0, 1, -math.inf),
        (0.3, 1.0, 3, -math.inf),
        (0.3, 1.0, 0, math.nan),
        (0.3, 1.0, 10, -math.inf),
        (1.0, 1.0, 0, math.nan),
        (1.0, 1.0, 1, -math.inf),
        (3.0, 1.0, 0, math.nan),
        (3.0, 1.0, 1, -math.inf),
        (3.0, 1.0, 3, -math.inf),
        (10.0, 1.0, 0, math.nan),
        (10.0, 1.0, 1, -math.inf),
        (10.0, 1.0, 10, -math.inf),
    ],
)
def test_ln_pmf_exact(r, p, x, expected):
    assert_same_or_nan(expected, NegativeBinomial(r, p).ln_pmf(x))


@pytest.mark.parametrize(
    "r,p,x,expected",
    [
        (1.0, 0.3, 0, 0.3),
        (1.0, 0.3, 1, 0.51),
        (1.0, 0.3, 4, 0.83193),
        (1.0, 0.3, 10, 0.9802267326),
        (10.0, 0.75, 0, 0.05631351471),
        (10.0, 0.75, 1, 0.1970973015),
        (10.0, 0.75, 10, 0.9960578583),
    ],
)
def test_cdf(r, p, x, expected):
    assert_almost(expected, NegativeBinomial(r, p).cdf(x), 1e-8)


def test_cdf_exact():
    d = NegativeBinomial(1.0, 1.0)
    assert d.cdf(0) == 1.0
    assert d.cdf(1) == 1.0


@pytest.mark.parametrize(
    "r,p,x,expected",
    [
        (1.0, 0.3, 0, 0.7),
        (1.0, 0.3, 1, 0.49),
        (1.0, 0.3, 4, 0.1680699999999986),
        (1.0, 0.3, 10, 0.019773267430000074),
        (10.0, 0.75, 0, 0.9436864852905275),
        (10.0, 0.75, 1, 0.8029026985168456),
        (10.0, 0.75, 10, 0.003942141664083465),
    ],
)
def test_sf(r, p, x, expected):
    assert_almost(expected, NegativeBinomial(r, p).sf(x), 1e-8)


def test_sf_exact():
    d = NegativeBinomial(1.0, 1.0)
    assert d.sf(0) == 0.0
    assert d.sf(1) == 0.0


def test_cdf_upper_bound():
    assert NegativeBinomial(3.0, 0.5).cdf(100) == 1.0


def test_sf_upper_bound():
    assert_almost(5.282409836586059e-28, NegativeBinomial(3.0, 0.5).sf(100), 1e-28)


@pytest.mark.parametrize("r,p,upper", [(5.0, 0.3, 35), (10.0, 0.7, 21)])
def test_pmf_sums_to_cdf(r, p, upper):
    d = NegativeBinomial(r, p)
    total = 0.0
    for x in range(upper + 1):
        total += d.pmf(x)
        assert abs(total - d.cdf(x)) < 1e-10
        assert abs(d.cdf(x) + d.sf(x) - 1.0) < 1e-10


def test_negative_argument_rejected():
    d = NegativeBinomial(3.0, 0.5)
    with pytest.raises(ValueError):
        d.pmf(-1)
    with pytest.raises(ValueError):
        d.cdf(-1)


def test_sample_mean_close_to_mean():
    d = NegativeBinomial(5.0, 0.3)
    rng = random.Random(12345)
    samples = [d.sample(rng) for _ in range(5000)]
    assert all(s >= 0 for s in samples)
    assert abs(sum(samples) / len(samples) - d.mean()) < 0.6


def test_sample_certain_success_is_zero():
    d = NegativeBinomial(3.0, 1.0)
    rng = random.Random(7)
    assert [d.sample(rng) for _ in range(20)] == [0] * 20


def test_equality():
    assert NegativeBinomial(2.0, 0.5) == NegativeBinomial(2.0, 0.5)
    assert not (NegativeBinomial(2.0, 0.5) == NegativeBinomial(2.0, 0.4))