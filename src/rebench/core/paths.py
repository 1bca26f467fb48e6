"""Package path resolution for rebench.

The benchmarking tool reports packages with "/"-separated identifiers
(e.g. ``github.com/user/repo/sub``) regardless of the host platform,
while baselines live on disk next to each package's sources. This module
reconciles the two address spaces once per run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rebench.core.exceptions import PathResolutionError

if TYPE_CHECKING:
    from rebench.core.types import RunRecord

TOOL_SEPARATOR = "/"


@dataclass(frozen=True)
class PathConvention:
    """Separator handling for one platform.

    Attributes:
        sep: Separator used by host paths.

    Example:
        >>> windows = PathConvention("\\\\")
        >>> windows.convert("example.com/proj/sub")
        'example.com\\\\proj\\\\sub'
    """

    sep: str = "/"

    @classmethod
    def native(cls) -> PathConvention:
        """Return the convention of the running platform."""
        return cls(os.sep)

    def convert(self, tool_path: str) -> str:
        """Convert a tool-reported package path to host form."""
        return tool_path.replace(TOOL_SEPARATOR, self.sep)

    def split(self, path: str) -> list[str]:
        return path.split(self.sep)

    def join(self, *pieces: str) -> str:
        return self.sep.join(pieces)


def find_source_root(cwd: str, package_path: str, convention: PathConvention) -> str | None:
    """Locate the source root from the working directory and a package path.

    The package path, or when invoked from an ancestor package its longest
    leading run of segments, has to match the trailing segments of ``cwd``.
    Matches starting at or before the second character are rejected so a
    bare filesystem root is never returned.

    Args:
        cwd: Absolute working directory of the invocation.
        package_path: Tool-reported package identifier.
        convention: Separator convention of ``cwd``.

    Returns:
        The directory containing the package tree, or None if not found.

    Example:
        >>> find_source_root("/home/me/go/src/example.com/proj", "example.com/proj", PathConvention())
        '/home/me/go/src'
    """
    if len(cwd) > 1:
        cwd = cwd.rstrip(convention.sep)

    pieces = [piece for piece in package_path.split(TOOL_SEPARATOR) if piece]
    for count in range(len(pieces), 0, -1):
        candidate = convention.join(*pieces[:count])
        if cwd != candidate and not cwd.endswith(convention.sep + candidate):
            continue

        index = len(cwd) - len(candidate)
        if index <= 1:
            return None
        # index - 1 also drops the separator in front of the match
        return cwd[: index - 1]

    return None


def resolve_source_root(cwd: str, record: RunRecord, convention: PathConvention) -> str:
    """Resolve the source root once for a whole run.

    Args:
        cwd: Absolute working directory of the invocation.
        record: Parsed run; its first package path is used.
        convention: Separator convention of ``cwd``.

    Returns:
        The source root shared by every package of the run.

    Raises:
        PathResolutionError: If the first package cannot be matched.
    """
    package_path = next(iter(record))
    root = find_source_root(cwd, package_path, convention)
    if root is None:
        raise PathResolutionError(cwd, package_path)
    return root


def package_dir(root: str, package_path: str, convention: PathConvention) -> str:
    """Build the working directory of one package."""
    return convention.join(root, convention.convert(package_path))
