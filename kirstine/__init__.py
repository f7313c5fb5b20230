"""kirstine: descriptive statistics over in-memory datasets.

Central tendency (mean, median, mode), dispersion (range, variance and
standard deviation for populations and samples) and association measures
(Pearson correlation, chi-squared, z-scores). Population and sample
estimators live in separate modules:

    >>> import kirstine
    >>> data = [600.0, 470.0, 170.0, 430.0, 300.0]
    >>> mu = kirstine.mean(data)
    >>> kirstine.population.variance(data, mu), kirstine.sample.variance(data, mu)
    (21704.0, 27130.0)
"""

__version__ = "0.1.0"

from kirstine import population, sample
from kirstine.config import get_settings
from kirstine.core import (
    EmptyDatasetError,
    RangeResult,
    chi_squared,
    correlation,
    mean,
    median,
    median_from_sorted,
    mode,
    range,
    sum_of_squares,
)


def __getattr__(name: str):
    """Lazy imports for the scipy-backed summary layer."""
    if name in ("describe", "describe_frame", "DescriptiveSummary", "AnalysisResult"):
        from kirstine.analysis import summary

        return getattr(summary, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "EmptyDatasetError",
    "RangeResult",
    "chi_squared",
    "correlation",
    "describe",
    "get_settings",
    "mean",
    "median",
    "median_from_sorted",
    "mode",
    "population",
    "range",
    "sample",
    "sum_of_squares",
    "__version__",
]
