# probdist

Probability distributions for Python. Each distribution checks its parameters
when it is built and offers its density or mass function, cumulative and
survival functions, summary statistics and random sampling.

## Distributions

| Module | Class | Kind |
| --- | --- | --- |
| `probdist.normal` | `Normal(mean, std_dev)` | continuous |
| `probdist.pareto` | `Pareto(scale, shape)` | continuous |
| `probdist.uniform` | `Uniform(min, max)` | continuous |
| `probdist.poisson` | `Poisson(lam)` | discrete |
| `probdist.negative_binomial` | `NegativeBinomial(r, p)` | discrete |

Parameters that are out of range, such as a NaN or a non-positive standard
deviation, raise `probdist.errors.BadParamsError`, a subclass of
`ValueError`.

## Installation

```
pip install probdist
```

## Usage

```python
import random

from probdist.errors import BadParamsError
from probdist.normal import Normal
from probdist.poisson import Poisson

n = Normal(0.0, 1.0)
n.mean()              # 0.0
n.pdf(1.0)            # about 0.2420
n.cdf(0.0)            # 0.5
n.inverse_cdf(0.975)  # about 1.96

p = Poisson(1.0)
p.pmf(1)              # about 0.3679
p.cdf(3)

rng = random.Random(42)
draw = n.sample(rng)

try:
    Normal(0.0, 0.0)
except BadParamsError:
    ...
```

## What each distribution offers

- Continuous distributions (`Normal`, `Pareto`, `Uniform`) provide `pdf`,
  `ln_pdf`, `cdf` and `sf`. `Normal` also provides `inverse_cdf`, which
  raises `ValueError` for an argument outside `[0, 1]`, and `std_dev`.
- Discrete distributions (`Poisson`, `NegativeBinomial`) provide `pmf`,
  `ln_pmf`, `cdf` and `sf`; these take a non-negative integer and raise
  `ValueError` for a negative one.
- All provide `min`, `max`, `mean`, `variance`, `skewness`, `mode` and
  `sample`. All but `NegativeBinomial` also provide `entropy` and `median`.
- For `Pareto`, `mean`, `variance` and `skewness` return `None` when the
  shape is at most 1, 2 or 3 respectively.
- The discrete distributions report `max()` as `2**64 - 1`.

The module-level helpers `cdf_unchecked`, `sf_unchecked`, `pdf_unchecked`,
`ln_pdf_unchecked` and `sample_unchecked` in `probdist.normal`, and
`sample_unchecked` in `probdist.poisson`, compute the same quantities without
building a distribution or checking parameters.

## Sampling

`sample` takes an optional `random.Random` instance; without one it uses the
module-level `random` functions. Seeding the instance makes results
reproducible. `Normal` draws through `random.Random.gauss`, `Poisson` uses
Knuth's method below a rate of 30 and a rejection method above it, and
`NegativeBinomial` draws a gamma-mixed Poisson variate. `Uniform.sample`
raises `ValueError` when the range is infinite.

## What this package does not do

It is a library only: there is no command-line tool, no parameter fitting
from data and no plotting. The set of distributions is limited to the five
listed above.

## Running the tests

```
pip install -e .[test]
pytest
```