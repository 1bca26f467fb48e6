"""Core data model aliases for rebench.

A run of the benchmarking tool produces a RunRecord: one PackageRecord
per package path, each mapping benchmark names to nanoseconds per
operation. Baselines persisted next to each package share the
PackageRecord shape.
"""

from __future__ import annotations

from typing import TypeAlias

BenchmarkName: TypeAlias = str
Timing: TypeAlias = int
PackageRecord: TypeAlias = dict[BenchmarkName, Timing]
RunRecord: TypeAlias = dict[str, PackageRecord]
