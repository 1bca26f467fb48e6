"""Unit tests for the plain-text reporter."""

from __future__ import annotations

from rebench.regression import compare
from rebench.reporters import delta_table, render_comparison, tab_align
from rebench.reporters.text import HEADER


class TestTabAlign:
    """Tests for tab_align()."""

    def test_aligns_columns(self) -> None:
        """Each column starts four spaces after the widest entry before it."""
        rows = [
            ("Benchmark Name", "New Speed", "Best Speed", "Factor (New/Old)"),
            ("BenchmarkA", "5", "10", "0.500000"),
        ]

        lines = tab_align(rows).split("\n")

        assert lines == [
            "Benchmark Name    New Speed    Best Speed    Factor (New/Old)",
            "BenchmarkA        5            10            0.500000",
        ]

    def test_malformed_rows_dropped(self) -> None:
        """Rows without four fields do not affect widths and are not output."""
        rows = [
            ("name", "new", "best", "factor"),
            ("a-very-long-malformed-row", "x", "y"),
            ("b", "1", "2", "3"),
            (),
            ("",),
        ]

        assert tab_align(rows) == "name    new    best    factor\nb       1      2       3"

    def test_last_column_not_padded(self) -> None:
        """Lines do not end with padding."""
        output = tab_align([("a", "b", "c", "d"), ("aa", "bb", "cc", "d")])

        assert all(not line.endswith(" ") for line in output.split("\n"))

    def test_empty(self) -> None:
        """No rows render as an empty string."""
        assert tab_align([]) == ""

    def test_accepts_lists(self) -> None:
        """Rows may be any sequence."""
        assert tab_align([["a", "b", "c", "d"]]) == "a    b    c    d"


class TestDeltaTable:
    """Tests for delta_table() and render_comparison()."""

    def test_first_run_rows(self) -> None:
        """Without a baseline file new benchmarks are marked NO FILE."""
        result = compare(None, {"BenchmarkA": 10}, 1.5, 0.7)

        assert delta_table(result) == [HEADER, ("BenchmarkA", "10", "NO FILE", "N/A")]

    def test_compared_rows(self) -> None:
        """Missing, new and compared benchmarks have distinct rows."""
        result = compare({"BenchmarkA": 500, "BenchmarkB": 1000}, {"BenchmarkB": 500, "BenchmarkC": 7}, 1.5, 0.7)

        assert delta_table(result) == [
            HEADER,
            ("BenchmarkA", "MISSING", "500", "N/A"),
            ("BenchmarkB", "500", "1000", "0.500000"),
            ("BenchmarkC", "7", "MISSING", "N/A"),
        ]

    def test_render_comparison(self) -> None:
        """The rendered report is the aligned delta table ending in a newline."""
        result = compare({"BenchmarkA": 100}, {"BenchmarkA": 300}, 1.5, 0.7)

        report = render_comparison(result)

        assert report.split("\n") == [
            "Benchmark Name    New Speed    Best Speed    Factor (New/Old)",
            "BenchmarkA        300          100           3.000000",
            "",
        ]

    def test_infinite_factor(self) -> None:
        """A non-zero timing against a zero best shows a +Inf factor."""
        result = compare({"BenchmarkA": 0}, {"BenchmarkA": 5}, 1.5, 0.7)

        assert delta_table(result)[1] == ("BenchmarkA", "5", "0", "+Inf")
