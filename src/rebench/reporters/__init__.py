"""Reporters module for rebench.

This module provides the aligned plain-text comparison report.
"""

from __future__ import annotations

from rebench.reporters.text import delta_table, render_comparison, tab_align

__all__ = [
    "delta_table",
    "render_comparison",
    "tab_align",
]
