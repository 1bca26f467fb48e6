"""Parser for the text output of the benchmarking tool.

Example:
    >>> output = "BenchmarkSleep-8\\t1\\t1000123 ns/op\\nok\\texample.com/proj\\t2.01s\\n"
    >>> parse_bench_output(output)
    {'example.com/proj': {'BenchmarkSleep-8': 1000123}}
"""

from __future__ import annotations

import logging

from rebench.core.exceptions import ParseError
from rebench.core.types import PackageRecord, RunRecord

logger = logging.getLogger(__name__)

DELIMITER = "\t"
BENCHMARK_PREFIX = "Benchmark"
UNIT_SUFFIX = "ns/op"
SKIPPED_MARKER = "?"
FLUSH_MARKER = "ok"
MAX_TIMING = 2**64 - 1


def _parse_timing(field: str, unit_suffix: str) -> int:
    value = field.removesuffix(unit_suffix).strip()
    if not value.isdigit() or not value.isascii():
        raise ValueError(f"invalid unsigned integer {value!r}")
    timing = int(value)
    if timing > MAX_TIMING:
        raise ValueError(f"{value} is out of range for a 64-bit timing")
    return timing


def parse_bench_output(
    output: str,
    *,
    delimiter: str = DELIMITER,
    benchmark_prefix: str = BENCHMARK_PREFIX,
    unit_suffix: str = UNIT_SUFFIX,
) -> RunRecord:
    """Turn raw benchmark output into per-package timings.

    Measurement lines accumulate until an ``ok`` line names the package
    they belong to. Packages the tool skipped (``?``) and lines with fewer
    than three columns are ignored.

    Args:
        output: Full standard output of one tool invocation.
        delimiter: Column delimiter.
        benchmark_prefix: Prefix identifying measurement lines.
        unit_suffix: Unit appended to the timing column.

    Returns:
        Mapping of package path to benchmark timings, in output order.

    Raises:
        ParseError: If any timing is not an unsigned integer.
    """
    logger.info("Parsing the results of the benchmark run...")

    record: RunRecord = {}
    current: PackageRecord = {}

    for line in output.splitlines():
        columns = [column.strip() for column in line.split(delimiter)]

        if len(columns) < 3 or columns[0] == SKIPPED_MARKER:
            continue

        if columns[0].startswith(benchmark_prefix):
            try:
                current[columns[0]] = _parse_timing(columns[2], unit_suffix)
            except ValueError as e:
                raise ParseError(f"Couldn't convert benchmark time of {columns[0]}: {e}", line=line) from e
        elif columns[0] == FLUSH_MARKER:
            record[columns[1]] = current
            current = {}

    return record
