"""Summary records built from the kirstine statistics.

This module provides:
- Descriptive summaries of a single dataset
- Per-column summaries of a DataFrame
- Pairwise Pearson correlations between DataFrame columns
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Literal

import numpy as np
import pandas as pd
from scipy import stats

from kirstine import population, sample
from kirstine.config import get_settings
from kirstine.core.descriptive import correlation, mean, median, mode
from kirstine.core.descriptive import range as arithmetic_range
from kirstine.core.validation import as_dataset, require_non_empty

logger = logging.getLogger(__name__)

Kind = Literal["sample", "population"]


def _fmt(value: float | None) -> str:
    if value is None:
        return "n/a"
    return f"{value:.{get_settings().display_precision}g}"


@dataclass
class DescriptiveSummary:
    """Descriptive statistics for one dataset.

    Attributes:
        label: Name of the dataset
        count: Number of values
        kind: Estimator used for variance and std ("sample" or "population")
        mean: Arithmetic mean
        median: Median value
        mode: Most frequent value
        minimum: Smallest value
        maximum: Largest value
        range: maximum - minimum
        coefficient_of_range: range / (maximum + minimum)
        variance: Variance for the chosen estimator
        std: Standard deviation for the chosen estimator
        skewness: Distribution skewness
        kurtosis: Distribution excess kurtosis
    """

    label: str
    count: int
    kind: Kind
    mean: float
    median: float
    mode: float
    minimum: float
    maximum: float
    range: float
    coefficient_of_range: float
    variance: float
    std: float
    skewness: float | None = None
    kurtosis: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "label": self.label,
            "count": self.count,
            "kind": self.kind,
            "mean": self.mean,
            "median": self.median,
            "mode": self.mode,
            "min": self.minimum,
            "max": self.maximum,
            "range": self.range,
            "coefficient_of_range": self.coefficient_of_range,
            "variance": self.variance,
            "std": self.std,
            "skewness": self.skewness,
            "kurtosis": self.kurtosis,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            f"**{self.label}** (n={self.count}, {self.kind})",
            f"  Mean: {_fmt(self.mean)}",
            f"  Median: {_fmt(self.median)}",
            f"  Mode: {_fmt(self.mode)}",
            f"  Std Dev: {_fmt(self.std)}",
            f"  Range: [{_fmt(self.minimum)}, {_fmt(self.maximum)}]"
            f" (coefficient {_fmt(self.coefficient_of_range)})",
        ]
        if self.skewness is not None:
            lines.append(f"  Skewness: {_fmt(self.skewness)}")
        return "\n".join(lines)


@dataclass
class CorrelationSummary:
    """Result from correlation analysis.

    Attributes:
        label_x: First column name
        label_y: Second column name
        n_points: Number of complete pairs used
        pearson_r: Pearson correlation coefficient
        interpretation: Human-readable interpretation
    """

    label_x: str
    label_y: str
    n_points: int
    pearson_r: float
    interpretation: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "label_x": self.label_x,
            "label_y": self.label_y,
            "n_points": self.n_points,
            "pearson_r": self.pearson_r,
            "interpretation": self.interpretation,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = [
            f"**Correlation: {self.label_x} vs {self.label_y}** (n={self.n_points})",
            f"  Pearson r = {self.pearson_r:.3f}",
        ]
        if self.interpretation:
            lines.append(f"  {self.interpretation}")
        return "\n".join(lines)


@dataclass
class AnalysisResult:
    """Complete result from a tabular analysis.

    Attributes:
        success: Whether analysis completed successfully
        summaries: List of descriptive summaries
        correlations: List of correlation results
        error: Error message if failed
    """

    success: bool
    summaries: list[DescriptiveSummary] = field(default_factory=list)
    correlations: list[CorrelationSummary] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "summaries": [s.to_dict() for s in self.summaries],
            "correlations": [c.to_dict() for c in self.correlations],
            "error": self.error,
        }

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        if not self.success:
            return f"**Analysis Failed:** {self.error}"

        records = [*self.summaries, *self.correlations]
        if not records:
            return "No analysis results."
        return "\n\n".join(r.format_for_display() for r in records)


def describe(
    data: Any,
    label: str = "data",
    kind: Kind | None = None,
) -> DescriptiveSummary:
    """Compute a descriptive summary of one dataset.

    Args:
        data: Dataset to summarise
        label: Name shown in the summary
        kind: "sample" or "population"; defaults to ``Settings.default_kind``

    Returns:
        DescriptiveSummary

    Raises:
        EmptyDatasetError: If ``data`` is empty

    Example:
        >>> summary = describe([600.0, 470.0, 170.0, 430.0, 300.0], kind="population")
        >>> summary.variance
        21704.0
    """
    arr = require_non_empty(as_dataset(data), "summary")
    kind = kind or get_settings().default_kind
    if kind not in ("sample", "population"):
        raise ValueError(f"Unknown estimator kind: {kind!r}")

    estimator = sample if kind == "sample" else population
    mu = mean(arr)
    spread, coefficient, (smallest, largest) = arithmetic_range(arr)
    var = estimator.variance(arr, mu)

    n = arr.size
    finite = bool(np.isfinite(arr).all())
    return DescriptiveSummary(
        label=label,
        count=n,
        kind=kind,
        mean=mu,
        median=median(arr),
        mode=mode(arr),
        minimum=smallest,
        maximum=largest,
        range=spread,
        coefficient_of_range=coefficient,
        variance=var,
        std=math.sqrt(var),
        skewness=float(stats.skew(arr)) if n >= 3 and finite else None,
        kurtosis=float(stats.kurtosis(arr)) if n >= 4 and finite else None,
    )


def describe_frame(
    df: pd.DataFrame,
    columns: list[str] | None = None,
    kind: Kind | None = None,
) -> AnalysisResult:
    """Compute descriptive summaries for DataFrame columns.

    Args:
        df: DataFrame to summarise
        columns: Column names (None = all numeric)
        kind: Estimator for variance and std

    Returns:
        AnalysisResult with one summary per usable column
    """
    if columns is None:
        columns = df.select_dtypes(include=[np.number]).columns.tolist()

    summaries = []

    for column in columns:
        if column not in df.columns:
            logger.debug(f"Skipping unknown column {column!r}")
            continue

        data = df[column].dropna()

        if not pd.api.types.is_numeric_dtype(data):
            logger.debug(f"Skipping non-numeric column {column!r}")
            continue

        if len(data) == 0:
            logger.debug(f"Skipping column {column!r} with no values")
            continue

        summaries.append(describe(data, label=str(column), kind=kind))

    return AnalysisResult(success=True, summaries=summaries)


def correlate_columns(
    df: pd.DataFrame,
    column_x: str,
    column_y: str,
) -> AnalysisResult:
    """Compute the Pearson correlation between two columns.

    Args:
        df: DataFrame holding both columns
        column_x: First column name
        column_y: Second column name

    Returns:
        AnalysisResult with correlation

    Example:
        >>> result = correlate_columns(df, "height", "weight")
        >>> print(result.correlations[0].format_for_display())
    """
    if column_x not in df.columns:
        return AnalysisResult(
            success=False, error=f"Column {column_x} not found in data"
        )
    if column_y not in df.columns:
        return AnalysisResult(
            success=False, error=f"Column {column_y} not found in data"
        )

    for column in (column_x, column_y):
        if not pd.api.types.is_numeric_dtype(df[column]):
            return AnalysisResult(
                success=False, error=f"Column {column} is not numeric"
            )

    # Rows with both values present
    clean_df = df[[column_x, column_y]].dropna()

    if len(clean_df) < 3:
        return AnalysisResult(
            success=False,
            error=f"Insufficient data for correlation (need at least 3 points, got {len(clean_df)})",
        )

    r = correlation(clean_df)

    result = CorrelationSummary(
        label_x=column_x,
        label_y=column_y,
        n_points=len(clean_df),
        pearson_r=r,
        interpretation=_interpret_correlation(r),
    )

    return AnalysisResult(success=True, correlations=[result])


# Upper bounds on |r| for each strength label
_STRENGTH_BANDS = (
    (0.1, "negligible"),
    (0.3, "weak"),
    (0.5, "moderate"),
    (0.7, "strong"),
    (math.inf, "very strong"),
)


def _interpret_correlation(pearson_r: float) -> str:
    """Describe the strength and direction of a correlation coefficient."""
    if math.isnan(pearson_r):
        return "Correlation is undefined (a column has no variance)."

    strength = next(label for bound, label in _STRENGTH_BANDS if abs(pearson_r) < bound)
    direction = "positive" if pearson_r > 0 else "negative"
    return f"{strength.capitalize()} {direction} correlation."


def multi_correlation(
    df: pd.DataFrame,
    columns: list[str],
) -> AnalysisResult:
    """Correlate every pair of columns, keeping the pairs that succeed.

    Args:
        df: DataFrame holding the columns
        columns: Column names

    Returns:
        AnalysisResult with all pairwise correlations
    """
    results = (correlate_columns(df, x, y) for x, y in combinations(columns, 2))
    return AnalysisResult(
        success=True,
        correlations=[c for r in results if r.success for c in r.correlations],
    )
