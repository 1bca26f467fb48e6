"""Models for regression detection.

This module provides the tolerances, per-benchmark rows and per-package
results produced when new timings are compared with a baseline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rebench.core.exceptions import ConfigurationError
from rebench.core.types import PackageRecord


class BenchStatus(str, Enum):
    """Classification of one benchmark against its baseline."""

    NEW = "new"
    MISSING = "missing"
    REGRESSED = "regressed"
    IMPROVED = "improved"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Tolerances:
    """Speed and record tolerances, given in percent of new/best.

    A benchmark whose ratio exceeds ``speed`` regressed; one whose ratio
    falls below ``record`` sets a new record. Ratios in between are
    unchanged.

    Attributes:
        speed_percent: Speed tolerance (default 150%).
        record_percent: Record tolerance (default 70%).

    Example:
        >>> Tolerances().speed
        1.5
    """

    speed_percent: int = 150
    record_percent: int = 70

    def __post_init__(self) -> None:
        if self.speed_percent <= 0 or self.record_percent <= 0:
            raise ConfigurationError("Tolerances must be positive percentages")
        if self.record_percent > self.speed_percent:
            raise ConfigurationError(
                f"Record tolerance ({self.record_percent}%) must not exceed speed tolerance ({self.speed_percent}%)"
            )

    @property
    def speed(self) -> float:
        """Speed tolerance as a ratio."""
        return self.speed_percent / 100

    @property
    def record(self) -> float:
        """Record tolerance as a ratio."""
        return self.record_percent / 100


@dataclass(frozen=True)
class DeltaRow:
    """Comparison of a single benchmark.

    Attributes:
        name: Benchmark name.
        current: New timing in ns/op, None when the benchmark is missing.
        baseline: Best known timing, None when there is none.
        ratio: current / baseline, only when both exist.
        status: Classification of the benchmark.
    """

    name: str
    current: int | None
    baseline: int | None
    ratio: float | None
    status: BenchStatus


@dataclass
class ComparisonResult:
    """Result of comparing one package's timings with its baseline.

    Attributes:
        rows: Per-benchmark rows, missing benchmarks first.
        new_baseline: Baseline to persist for the package.
        baseline_present: Whether a baseline existed before the comparison.

    Example:
        >>> result = compare(baseline, current, 1.5, 0.7)
        >>> if result.has_failures:
        ...     print(result.summary())
    """

    rows: list[DeltaRow] = field(default_factory=list)
    new_baseline: PackageRecord = field(default_factory=dict)
    baseline_present: bool = False

    def with_status(self, status: BenchStatus) -> list[DeltaRow]:
        """Rows classified with the given status."""
        return [row for row in self.rows if row.status == status]

    @property
    def has_missing(self) -> bool:
        """Check if any baseline benchmark is absent from the new run."""
        return any(row.status == BenchStatus.MISSING for row in self.rows)

    @property
    def has_regression(self) -> bool:
        """Check if any benchmark is slower than the speed tolerance allows."""
        return any(row.status == BenchStatus.REGRESSED for row in self.rows)

    @property
    def has_failures(self) -> bool:
        """Check if the comparison should fail the run."""
        return self.has_missing or self.has_regression

    def summary(self) -> str:
        """Generate a one-line summary of the classifications.

        Returns:
            Summary string with a count per non-empty status.
        """
        counts = [f"{len(self.with_status(status))} {status.value}" for status in BenchStatus]
        counts = [count for count in counts if not count.startswith("0 ")]
        return ", ".join(counts) if counts else "no benchmarks"
