"""Normal, Pareto, uniform, Poisson and negative binomial distributions."""

__version__ = "0.1.0"

__all__ = ["errors", "normal", "poisson", "negative_binomial", "pareto", "uniform"]