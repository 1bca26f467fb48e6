"""Configuration management for rebench.

This module provides configuration classes using pydantic-settings
for environment variable management and validation.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# A -run pattern that matches no test function, so only benchmarks execute.
NO_TESTS_PATTERN = "lksadfjalsdjfalskdfjalskdf"

DEFAULT_BENCH_COMMAND: list[str] = ["go", "test", "-bench=.", f"-run={NO_TESTS_PATTERN}", "./..."]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be configured via environment variables with
    the REBENCH_ prefix. Command-line options take precedence.

    Attributes:
        speed_tolerance: Percentage new/best above which a benchmark regressed.
        record_tolerance: Percentage new/best below which a new record is kept.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        quiet: Mute all log output.
        bench_command: Command used to run every benchmark below the root.
        results_file: File name for the latest results of a package.
        baseline_file: File name for the best known results of a package.
        report_file: File name for the human-readable comparison.

    Example:
        >>> # export REBENCH_SPEED_TOLERANCE=200
        >>> settings = Settings()
        >>> settings.speed_tolerance
        200

    Environment Variables:
        REBENCH_SPEED_TOLERANCE: Speed tolerance in percent (default: 150)
        REBENCH_RECORD_TOLERANCE: Record tolerance in percent (default: 70)
        REBENCH_LOG_LEVEL: Logging level (default: INFO)
        REBENCH_QUIET: Mute log output (default: false)
        REBENCH_BENCH_COMMAND: JSON list with the benchmark command
    """

    model_config = SettingsConfigDict(
        env_prefix="REBENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Tolerances
    speed_tolerance: int = Field(
        default=150,
        gt=0,
        description="Percentage tolerance for a slower benchmark before failing the run",
    )
    record_tolerance: int = Field(
        default=70,
        gt=0,
        description="Percentage tolerance for a faster benchmark before overwriting the record",
    )

    # Output
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    quiet: bool = Field(
        default=False,
        description="Mute log output",
    )

    # Tool and artifacts
    bench_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BENCH_COMMAND),
        min_length=1,
        description="Command that runs all benchmarks from the invocation directory",
    )
    results_file: str = Field(
        default=".bench_results.json",
        description="Latest results file written in each package directory",
    )
    baseline_file: str = Field(
        default=".bench_best.json",
        description="Best known results file written in each package directory",
    )
    report_file: str = Field(
        default="bench_comparison.txt",
        description="Aligned comparison report written in each package directory",
    )
