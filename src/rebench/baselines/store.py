"""JSON file storage for per-package baselines.

Each package directory holds three artifacts: the latest results, the
best known results (the baseline) and a human-readable comparison. Every
save rotates the previous version of each artifact into a backup sibling.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

from pydantic import Field, TypeAdapter, ValidationError

from rebench.core.types import PackageRecord

logger = logging.getLogger(__name__)

_record_adapter: TypeAdapter[dict[str, int]] = TypeAdapter(
    dict[str, Annotated[int, Field(strict=True, ge=0)]],
)


def backup_name(name: str) -> str:
    """Return the hidden backup file name for an artifact.

    Example:
        >>> backup_name("bench_comparison.txt")
        '.bench_comparison.txt.old'
    """
    hidden = name if name.startswith(".") else f".{name}"
    return f"{hidden}.old"


@dataclass(frozen=True)
class ArtifactNames:
    """File names of the artifacts stored in each package directory.

    Attributes:
        results: Latest results of the package.
        baseline: Best known results of the package.
        report: Aligned comparison report.
    """

    results: str = ".bench_results.json"
    baseline: str = ".bench_best.json"
    report: str = "bench_comparison.txt"

    def all(self) -> tuple[str, str, str]:
        return (self.results, self.baseline, self.report)


class BaselineStore:
    """Per-package JSON storage for benchmark results and baselines.

    All operations take the package directory explicitly; nothing is
    written outside of it.

    Example:
        >>> store = BaselineStore()
        >>> best = store.load("/home/me/go/src/example.com/proj")
        >>> store.save("/home/me/go/src/example.com/proj", results, new_best, report)
    """

    def __init__(self, names: ArtifactNames | None = None) -> None:
        """Initialize the store.

        Args:
            names: Artifact file names. Defaults to ArtifactNames().
        """
        self.names = names or ArtifactNames()

    def _read_record(self, path: Path) -> PackageRecord | None:
        """Read a flat benchmark record.

        Args:
            path: JSON file to read.

        Returns:
            The record, or None if the file is absent or unreadable.
        """
        if not path.exists():
            logger.info(f"Previous benchmark file {path.name} does not exist in {path.parent}")
            return None

        try:
            data = json.loads(path.read_bytes())
            return _record_adapter.validate_python(data)
        except OSError as e:
            logger.warning(f"Cannot open {path}: {e}")
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Cannot unmarshal benchmarks from {path}: {e}")
        return None

    def load(self, package_dir: str | Path) -> PackageRecord | None:
        """Load the best known timings of a package.

        A missing or corrupt file is equivalent to a first run.

        Args:
            package_dir: Package working directory.

        Returns:
            The baseline record, or None.
        """
        return self._read_record(Path(package_dir) / self.names.baseline)

    def load_results(self, package_dir: str | Path) -> PackageRecord | None:
        """Load the latest results of a package.

        Args:
            package_dir: Package working directory.

        Returns:
            The latest results record, or None.
        """
        return self._read_record(Path(package_dir) / self.names.results)

    def _rotate(self, path: Path) -> None:
        """Move an artifact to its backup sibling, best effort."""
        if not path.exists():
            return

        backup = path.with_name(backup_name(path.name))
        logger.info(f"Backing up {path.name} in {backup.name}")
        try:
            backup.unlink(missing_ok=True)
            path.rename(backup)
        except OSError as e:
            logger.warning(f"Could not back up {path.name}, overwriting if possible: {e}")

    def _write(self, path: Path, content: str) -> None:
        """Write a file with atomic replace.

        Uses temp file + rename so a reader never sees a partial artifact.

        Args:
            path: Destination file.
            content: Text to write.
        """
        try:
            temp_fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".rebench_", suffix=".tmp")
        except OSError as e:
            logger.error(f"Couldn't write {path.name} in {path.parent}: {e}")
            return

        try:
            with os.fdopen(temp_fd, "w") as f:
                f.write(content)
            Path(temp_path).replace(path)
        except OSError as e:
            Path(temp_path).unlink(missing_ok=True)
            logger.error(f"Couldn't write {path.name} in {path.parent}: {e}")

    def save(
        self,
        package_dir: str | Path,
        results: PackageRecord,
        new_baseline: PackageRecord,
        report: str,
    ) -> None:
        """Back up the previous artifacts and store the new ones.

        Empty records are not written, and the report is only written when
        at least one record is, so directories without benchmarks stay clean.

        Args:
            package_dir: Package working directory.
            results: Timings of this run.
            new_baseline: Best known timings after the comparison.
            report: Aligned comparison report.
        """
        directory = Path(package_dir)

        for name in self.names.all():
            self._rotate(directory / name)

        if results:
            self._write(directory / self.names.results, json.dumps(results, indent=2))

        if new_baseline:
            self._write(directory / self.names.baseline, json.dumps(new_baseline, indent=2))

        if results or new_baseline:
            self._write(directory / self.names.report, report)
