"""End-to-end tests for the CLI workflow.

Runs the full run -> parse -> compare -> store pipeline against a fake
benchmarking tool whose output is read from a file, mirroring successive
development iterations of one package.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rebench.cli.main import app

runner = CliRunner()

PACKAGE = "example.com/proj/testpackage"

FAKE_TOOL = """\
import pathlib
import sys

output = pathlib.Path(sys.argv[1])
if not output.exists():
    sys.exit(2)
sys.stdout.write(output.read_text())
"""


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo the root logger configuration done by the CLI."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a package tree and point the tool command at a fake go test."""
    package = tmp_path / "src" / "example.com" / "proj" / "testpackage"
    package.mkdir(parents=True)

    tool = tmp_path / "fake_go.py"
    tool.write_text(FAKE_TOOL)
    output = tmp_path / "go_output.txt"

    monkeypatch.chdir(package)
    monkeypatch.setenv("REBENCH_BENCH_COMMAND", json.dumps([sys.executable, str(tool), str(output)]))
    return package


def write_output(package: Path, sleep: int, sleep2: int | None) -> None:
    """Write the output the fake tool prints on its next run."""
    lines = [f"pkg: {PACKAGE}", f"BenchmarkSleep-8    \t       1\t{sleep} ns/op"]
    if sleep2 is not None:
        lines.append(f"BenchmarkSleep2-8   \t       1\t{sleep2} ns/op")
    lines += ["PASS", f"ok  \t{PACKAGE}\t6.01s"]
    output = package.parents[3] / "go_output.txt"
    output.write_text("\n".join(lines) + "\n")


def read_best(package: Path) -> dict[str, int]:
    return json.loads((package / ".bench_best.json").read_text())


@pytest.mark.e2e
class TestCLIWorkflow:
    """E2E tests for the CLI workflow."""

    def test_iterations(self, workspace: Path) -> None:
        """First run, regression, record and missing benchmark in sequence."""
        write_output(workspace, 1000, 5000)
        result = runner.invoke(app, ["-q"])
        assert result.exit_code == 0
        assert read_best(workspace) == {"BenchmarkSleep-8": 1000, "BenchmarkSleep2-8": 5000}

        write_output(workspace, 3000, 5000)
        result = runner.invoke(app, ["-q"])
        assert result.exit_code == 1
        assert read_best(workspace)["BenchmarkSleep-8"] == 1000

        write_output(workspace, 400, 5100)
        result = runner.invoke(app, ["-q"])
        assert result.exit_code == 0
        assert read_best(workspace) == {"BenchmarkSleep-8": 400, "BenchmarkSleep2-8": 5000}

        write_output(workspace, 400, None)
        result = runner.invoke(app, ["-q"])
        assert result.exit_code == 1
        assert read_best(workspace) == {"BenchmarkSleep-8": 400, "BenchmarkSleep2-8": 5000}

        report = (workspace / "bench_comparison.txt").read_text()
        assert report.split("\n")[0].startswith("Benchmark Name")
        assert "BenchmarkSleep2-8    MISSING" in report
        assert (workspace / ".bench_comparison.txt.old").exists()

    def test_looser_tolerance_accepts_slowdown(self, workspace: Path) -> None:
        """A wider speed tolerance lets a slowdown pass."""
        write_output(workspace, 1000, 5000)
        runner.invoke(app, ["-q"])

        write_output(workspace, 3000, 5000)
        result = runner.invoke(app, ["-q", "--speed-tol", "400"])

        assert result.exit_code == 0

    def test_tool_failure(self, workspace: Path) -> None:
        """A failing tool aborts with a negative status and writes nothing."""
        result = runner.invoke(app, ["-q"])

        assert result.exit_code == -1
        assert list(workspace.iterdir()) == []
