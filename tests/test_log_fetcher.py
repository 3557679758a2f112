# tests/test_log_fetcher.py
from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from ecswait.logs.fetcher import LogFetcher, require_tool
from ecswait.logs.types import LogToolError, ToolMissingError


def _write_tool(bin_dir: Path, body: str) -> Path:
    bin_dir.mkdir(exist_ok=True)
    tool = bin_dir / "ecs-cli"
    tool.write_text(f"#!{sys.executable}\nimport sys\n{body}\n", encoding="utf-8")
    tool.chmod(0o755)
    return tool


def test_require_tool_finds_tool_on_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    tool = _write_tool(tmp_path / "bin", "raise SystemExit(0)")
    monkeypatch.setenv("PATH", str(tool.parent))

    assert require_tool() == str(tool)


def test_require_tool_missing_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))

    with pytest.raises(ToolMissingError) as exc_info:
        require_tool()

    assert exc_info.value.tool == "ecs-cli"


def test_command_line() -> None:
    fetcher = LogFetcher("/usr/local/bin/ecs-cli", "eu-west-1", "demo")

    assert fetcher.command("abc123") == [
        "/usr/local/bin/ecs-cli",
        "logs",
        "--task-id",
        "abc123",
        "--region",
        "eu-west-1",
        "--cluster",
        "demo",
    ]


def test_stream_copies_tool_output(tmp_path: Path) -> None:
    record = tmp_path / "argv.txt"
    tool = _write_tool(
        tmp_path / "bin",
        f"open(r'{record}', 'w').write(' '.join(sys.argv[1:]))\n"
        "print('first line')\n"
        "print('second line')",
    )
    out = io.StringIO()

    LogFetcher(str(tool), "us-east-1", "demo").stream("abc123", out)

    assert out.getvalue().splitlines() == ["first line", "second line"]
    assert record.read_text(encoding="utf-8") == (
        "logs --task-id abc123 --region us-east-1 --cluster demo"
    )


def test_stream_nonzero_exit_raises(tmp_path: Path) -> None:
    tool = _write_tool(tmp_path / "bin", "print('partial')\nraise SystemExit(6)")
    out = io.StringIO()

    with pytest.raises(LogToolError) as exc_info:
        LogFetcher(str(tool), "us-east-1", "demo").stream("abc123", out)

    assert exc_info.value.returncode == 6
    assert out.getvalue() == "partial\n"


def test_stream_tool_that_cannot_start_raises_tool_missing(tmp_path: Path) -> None:
    gone = tmp_path / "bin" / "ecs-cli"

    with pytest.raises(ToolMissingError):
        LogFetcher(str(gone), "us-east-1", "demo").stream("abc123", io.StringIO())


def test_stream_tool_without_exec_bit_raises_tool_missing(tmp_path: Path) -> None:
    tool = _write_tool(tmp_path / "bin", "raise SystemExit(0)")
    tool.chmod(0o644)

    with pytest.raises(ToolMissingError):
        LogFetcher(str(tool), "us-east-1", "demo").stream("abc123", io.StringIO())


@pytest.mark.parametrize(
    "returncode, expected",
    [
        (1, 1),
        (6, 6),
        (-9, 137),
        (-15, 143),
    ],
)
def test_log_tool_error_exit_status(returncode: int, expected: int) -> None:
    err = LogToolError(["ecs-cli", "logs"], returncode)
    assert err.exit_status == expected
