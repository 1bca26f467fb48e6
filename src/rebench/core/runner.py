"""Benchmarking tool invocation for rebench."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from rebench.core.exceptions import ToolInvocationError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def run_benchmarks(command: Sequence[str], cwd: str) -> str:
    """Run the benchmarking tool and return its standard output.

    The call blocks until the tool exits; output is only consumed once
    the whole run has finished.

    Args:
        command: Executable and arguments.
        cwd: Directory the tool runs from.

    Returns:
        The complete standard output of the tool.

    Raises:
        ToolInvocationError: If the tool cannot be started or exits non-zero.
    """
    logger.info(f"Running {' '.join(command)}")

    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise ToolInvocationError(f"Problem running {command[0]}: {e}") from e

    if completed.returncode != 0:
        logger.debug(f"Benchmark tool stderr:\n{completed.stderr}")
        raise ToolInvocationError(f"{command[0]} returned with non-zero exit status {completed.returncode}")

    return completed.stdout
