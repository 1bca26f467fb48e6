"""Regression detector for benchmark timings.

This module provides the pure ``compare`` function deciding, per
benchmark, whether a package regressed or set a new record, and the
RegressionDetector class that applies it with a fixed pair of tolerances.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from rebench.regression.models import BenchStatus, ComparisonResult, DeltaRow, Tolerances

if TYPE_CHECKING:
    from rebench.core.types import PackageRecord

logger = logging.getLogger(__name__)


def _ratio(current: int, baseline: int) -> float:
    if baseline == 0:
        return 1.0 if current == 0 else math.inf
    return current / baseline


def compare(
    baseline: PackageRecord | None,
    current: PackageRecord,
    speed_tol: float,
    record_tol: float,
) -> ComparisonResult:
    """Compare new timings with the best known ones.

    Neither input is modified. Benchmarks missing from ``current`` stay in
    the new baseline, regressions never replace the old value, and only
    ratios below ``record_tol`` promote the new timing.

    Args:
        baseline: Best known timings, or None on a first run.
        current: Timings of this run.
        speed_tol: Ratio above which a benchmark regressed.
        record_tol: Ratio below which a benchmark sets a new record.

    Returns:
        ComparisonResult with one row per benchmark and the new baseline.

    Example:
        >>> result = compare({"X": 1000, "Y": 10000}, {"X": 500, "Y": 10000}, 1.5, 0.7)
        >>> result.new_baseline
        {'X': 500, 'Y': 10000}
    """
    if baseline is None:
        rows = [DeltaRow(name, timing, None, None, BenchStatus.NEW) for name, timing in current.items()]
        return ComparisonResult(rows=rows, new_baseline=dict(current), baseline_present=False)

    rows = []
    new_baseline = dict(baseline)

    for name, best in baseline.items():
        if name not in current:
            rows.append(DeltaRow(name, None, best, None, BenchStatus.MISSING))

    for name, timing in current.items():
        if name not in baseline:
            rows.append(DeltaRow(name, timing, None, None, BenchStatus.NEW))
            new_baseline[name] = timing
            continue

        best = baseline[name]
        ratio = _ratio(timing, best)
        if ratio > speed_tol:
            status = BenchStatus.REGRESSED
        elif ratio < record_tol:
            status = BenchStatus.IMPROVED
            new_baseline[name] = timing
        else:
            status = BenchStatus.UNCHANGED
        rows.append(DeltaRow(name, timing, best, ratio, status))

    return ComparisonResult(rows=rows, new_baseline=new_baseline, baseline_present=True)


class RegressionDetector:
    """Detect regressions and records for each package of a run.

    Attributes:
        tolerances: Speed and record tolerances.

    Example:
        >>> detector = RegressionDetector(Tolerances(speed_percent=200))
        >>> result = detector.detect("example.com/proj", baseline, current)
        >>> if result.has_regression:
        ...     print(result.summary())
    """

    def __init__(self, tolerances: Tolerances | None = None) -> None:
        """Initialize detector.

        Args:
            tolerances: Tolerances to apply. Defaults to Tolerances().
        """
        self.tolerances = tolerances or Tolerances()

    def detect(self, package_path: str, baseline: PackageRecord | None, current: PackageRecord) -> ComparisonResult:
        """Compare a package's timings and log every notable benchmark.

        Args:
            package_path: Package the timings belong to, used in log output.
            baseline: Best known timings, or None on a first run.
            current: Timings of this run.

        Returns:
            The ComparisonResult from ``compare``.
        """
        result = compare(baseline, current, self.tolerances.speed, self.tolerances.record)

        if not result.baseline_present:
            logger.info(
                f"No best benchmarks on record for {package_path}, "
                "recording all current benchmarks (if any) as new best."
            )
            return result

        missing = result.with_status(BenchStatus.MISSING)
        if missing:
            names = " ".join(row.name for row in missing)
            logger.warning(f"Old benchmarks appear to be missing, is this intentional? Missing benchmarks: {names}")

        for row in result.rows:
            if row.status == BenchStatus.NEW:
                logger.info(f"Benchmark {row.name} appears to be new, logging it as new best for this benchmark.")
            elif row.status == BenchStatus.REGRESSED:
                logger.warning(
                    f"Benchmark {row.name} runs at {row.ratio:f}x the best speed. "
                    "This is slower than expected"
                )
            elif row.status == BenchStatus.IMPROVED:
                logger.info(f"Benchmark {row.name} runs at {row.ratio:f}x the best speed. This is a new record!")

        return result
