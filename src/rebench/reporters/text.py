"""Plain-text reporter for rebench.

This module renders a package comparison as a flat table whose columns
start four spaces after the widest entry of the previous column.

Example:
    >>> print(tab_align([("Benchmark Name", "New Speed"), ("a", "b", "c", "d"), ("ab", "c", "d", "e")]))
    a     b    c    d
    ab    c    d    e
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rebench.regression.models import BenchStatus

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from rebench.regression.models import ComparisonResult, DeltaRow

COLUMNS = 4
GUTTER = 4

HEADER = ("Benchmark Name", "New Speed", "Best Speed", "Factor (New/Old)")
MISSING = "MISSING"
NO_FILE = "NO FILE"
NOT_APPLICABLE = "N/A"
INFINITE = "+Inf"


def tab_align(rows: Iterable[Sequence[str]]) -> str:
    """Align 4-column rows into a text table.

    Rows without exactly four fields are dropped from both the width
    computation and the output.

    Args:
        rows: Rows of text fields, header included.

    Returns:
        Newline-joined aligned lines in input order.
    """
    kept = [row for row in rows if len(row) == COLUMNS]

    widths = [0] * COLUMNS
    for row in kept:
        for i, field in enumerate(row):
            widths[i] = max(widths[i], len(field))

    lines = []
    for row in kept:
        line = row[0]
        for i in range(COLUMNS - 1):
            line += " " * (widths[i] - len(row[i]) + GUTTER)
            line += row[i + 1]
        lines.append(line)

    return "\n".join(lines)


def _delta_fields(row: DeltaRow, baseline_present: bool) -> tuple[str, str, str, str]:
    if row.status == BenchStatus.MISSING:
        return (row.name, MISSING, str(row.baseline), NOT_APPLICABLE)
    if row.status == BenchStatus.NEW:
        return (row.name, str(row.current), MISSING if baseline_present else NO_FILE, NOT_APPLICABLE)
    ratio = INFINITE if row.ratio == math.inf else f"{row.ratio:f}"
    return (row.name, str(row.current), str(row.baseline), ratio)


def delta_table(result: ComparisonResult) -> list[tuple[str, str, str, str]]:
    """Build the report rows of a comparison, header first.

    Args:
        result: Comparison of one package.

    Returns:
        List of 4-field rows.
    """
    return [HEADER, *(_delta_fields(row, result.baseline_present) for row in result.rows)]


def render_comparison(result: ComparisonResult) -> str:
    """Render a comparison as the aligned report stored next to the package.

    The report ends with a newline; a zero best timing with a non-zero new
    timing shows its factor as ``+Inf``.
    """
    return tab_align(delta_table(result)) + "\n"
