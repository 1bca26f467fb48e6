"""rebench: track Go benchmark timings across development."""

from __future__ import annotations

from rebench.baselines import ArtifactNames, BaselineStore
from rebench.core.rebench import rebench
from rebench.parsing import parse_bench_output
from rebench.regression import BenchStatus, ComparisonResult, DeltaRow, RegressionDetector, Tolerances, compare
from rebench.reporters import render_comparison, tab_align

__version__ = "0.2.0"
__all__ = [
    # Storage
    "ArtifactNames",
    "BaselineStore",
    # Parsing
    "parse_bench_output",
    # Regression
    "BenchStatus",
    "ComparisonResult",
    "DeltaRow",
    "RegressionDetector",
    "Tolerances",
    "compare",
    # Reporting
    "render_comparison",
    "tab_align",
    # Run
    "rebench",
    # Version
    "__version__",
]
