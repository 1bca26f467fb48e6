"""Core module for rebench.

This module contains the data model, error types, configuration, path
resolution and tool invocation. Run orchestration lives in
``rebench.core.rebench``.
"""

from __future__ import annotations

from rebench.core.config import Settings
from rebench.core.exceptions import (
    ConfigurationError,
    ParseError,
    PathResolutionError,
    RebenchError,
    ToolInvocationError,
)
from rebench.core.paths import PathConvention, find_source_root, package_dir, resolve_source_root
from rebench.core.runner import run_benchmarks
from rebench.core.types import BenchmarkName, PackageRecord, RunRecord, Timing

__all__ = [
    # Types
    "BenchmarkName",
    "PackageRecord",
    "RunRecord",
    "Timing",
    # Exceptions
    "ConfigurationError",
    "ParseError",
    "PathResolutionError",
    "RebenchError",
    "ToolInvocationError",
    # Config
    "Settings",
    # Paths
    "PathConvention",
    "find_source_root",
    "package_dir",
    "resolve_source_root",
    # Tool
    "run_benchmarks",
]
