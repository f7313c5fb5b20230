"""Statistical summaries for kirstine.

This module contains:
- Descriptive summaries (mean, median, mode, dispersion, shape)
- Column-wise summaries and correlations for pandas DataFrames
"""

from kirstine.analysis.summary import (
    AnalysisResult,
    CorrelationSummary,
    DescriptiveSummary,
    correlate_columns,
    describe,
    describe_frame,
    multi_correlation,
)

__all__ = [
    "AnalysisResult",
    "CorrelationSummary",
    "DescriptiveSummary",
    "correlate_columns",
    "describe",
    "describe_frame",
    "multi_correlation",
]
