"""Regression detection module for rebench.

This module compares a package's new benchmark timings with its best
known baseline.

Example:
    >>> from rebench.regression import RegressionDetector, Tolerances
    >>>
    >>> detector = RegressionDetector(Tolerances(speed_percent=150, record_percent=70))
    >>> result = detector.detect("example.com/proj", baseline, current)
    >>> if result.has_failures:
    ...     print("Benchmarks regressed or went missing!")
"""

from __future__ import annotations

from rebench.regression.detector import RegressionDetector, compare
from rebench.regression.models import (
    BenchStatus,
    ComparisonResult,
    DeltaRow,
    Tolerances,
)

__all__ = [
    "BenchStatus",
    "ComparisonResult",
    "DeltaRow",
    "RegressionDetector",
    "Tolerances",
    "compare",
]
