"""Baseline storage for rebench.

Example:
    >>> from rebench.baselines import BaselineStore
    >>> store = BaselineStore()
    >>> best = store.load(package_dir)
"""

from __future__ import annotations

from rebench.baselines.store import ArtifactNames, BaselineStore, backup_name

__all__ = [
    "ArtifactNames",
    "BaselineStore",
    "backup_name",
]
