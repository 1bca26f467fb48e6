"""Run orchestration for rebench.

This module ties the pieces together: run the benchmarks, parse their
output, and compare every package with its stored baseline, one package
at a time.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from rebench.baselines.store import ArtifactNames, BaselineStore
from rebench.core.config import Settings
from rebench.core.exceptions import ParseError, PathResolutionError, ToolInvocationError
from rebench.core.paths import PathConvention, package_dir, resolve_source_root
from rebench.core.runner import run_benchmarks
from rebench.parsing import parse_bench_output
from rebench.regression import RegressionDetector, Tolerances
from rebench.reporters import render_comparison

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ABORTED = -1

Runner = Callable[[Sequence[str], str], str]


def store_from_settings(settings: Settings) -> BaselineStore:
    """Create a BaselineStore using the artifact names from settings."""
    return BaselineStore(
        ArtifactNames(
            results=settings.results_file,
            baseline=settings.baseline_file,
            report=settings.report_file,
        )
    )


def rebench(
    speed_tol_percent: int,
    record_tol_percent: int,
    *,
    cwd: str | None = None,
    settings: Settings | None = None,
    store: BaselineStore | None = None,
    convention: PathConvention | None = None,
    runner: Runner = run_benchmarks,
) -> int:
    """Run all benchmarks and compare them with the stored bests.

    Args:
        speed_tol_percent: Percentage new/best above which a benchmark regressed.
        record_tol_percent: Percentage new/best below which a new record is stored.
        cwd: Directory of invocation. Defaults to the process working directory.
        settings: Settings providing the tool command and artifact names.
        store: Baseline store. Defaults to one built from settings.
        convention: Path separator convention. Defaults to the platform's.
        runner: Callable running the tool and returning its output.

    Returns:
        0 when every package passed, 1 when any benchmark regressed or went
        missing, -1 when the run aborted before any comparison.

    Raises:
        ConfigurationError: If the tolerances are inconsistent.
    """
    settings = settings or Settings()
    store = store or store_from_settings(settings)
    convention = convention or PathConvention.native()
    cwd = cwd or os.getcwd()
    detector = RegressionDetector(Tolerances(speed_percent=speed_tol_percent, record_percent=record_tol_percent))

    try:
        record = parse_bench_output(runner(settings.bench_command, cwd))
    except (ToolInvocationError, ParseError) as e:
        logger.error(f"{e}, aborting!")
        return EXIT_ABORTED

    if not record:
        logger.info("Nothing to do! No benchmarks!")
        return EXIT_OK

    try:
        root = resolve_source_root(cwd, record, convention)
    except PathResolutionError as e:
        logger.error(f"{e} Aborting")
        return EXIT_ABORTED
    logger.info(f"Found source root as {root}")

    missing = False
    too_slow = False
    for package_path, benches in record.items():
        logger.info(f"Working in package {package_path}")
        directory = package_dir(root, package_path, convention)
        if not Path(directory).is_dir():
            logger.warning(f"Cannot enter the directory for the package {package_path} ({directory}), ignoring")
            continue

        logger.info("Checking for and loading best benchmarks")
        best = store.load(directory)
        if not benches and best is None:
            logger.info(f"No benchmarks in {package_path}, nothing to store")
            continue

        result = detector.detect(package_path, best, benches)
        missing = missing or result.has_missing
        too_slow = too_slow or result.has_regression
        logger.info(f"Package {package_path}: {result.summary()}")

        store.save(directory, benches, result.new_baseline, render_comparison(result))

    exit_code = EXIT_OK
    if missing:
        logger.warning("Old benchmarks were missing, flagging with non-zero return")
        exit_code = EXIT_FAILED
    if too_slow:
        logger.warning("New benchmarks are too slow, flagging with non-zero return")
        exit_code = EXIT_FAILED

    return exit_code
