"""Custom exceptions for rebench.

This module defines the exception hierarchy used throughout the tool.
All exceptions inherit from RebenchError for easy catching.
"""

from __future__ import annotations


class RebenchError(Exception):
    """Base exception for all rebench errors.

    Example:
        >>> try:
        ...     # rebench operations
        ...     pass
        ... except RebenchError as e:
        ...     print(f"rebench error: {e}")
    """


class ToolInvocationError(RebenchError):
    """Raised when the benchmarking tool cannot be run or exits non-zero.

    This is fatal for the whole run: nothing is written to disk.

    Example:
        >>> raise ToolInvocationError("go test exited with status 2")
    """


class ParseError(RebenchError):
    """Raised when a benchmark timing cannot be parsed.

    A partially parsed run is never returned, since it could hide a
    real regression.

    Attributes:
        line: The raw output line that failed to parse.
    """

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class PathResolutionError(RebenchError):
    """Raised when the source root cannot be located from the working directory.

    Attributes:
        cwd: Working directory the tool was invoked from.
        package_path: Tool-reported package path that failed to match.
    """

    def __init__(self, cwd: str, package_path: str) -> None:
        super().__init__(
            f"Cannot isolate the source root given the directory of invocation {cwd!r} "
            f"and the package path {package_path!r}. Perhaps you're using symbolic links?"
        )
        self.cwd = cwd
        self.package_path = package_path


class ConfigurationError(RebenchError):
    """Raised when configuration is invalid.

    Example:
        >>> raise ConfigurationError("record tolerance must not exceed speed tolerance")
    """
