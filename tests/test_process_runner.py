"""Tests for the asynchronous process runner."""

import asyncio
import sys

from ffprobe_async.tools.cli import EXIT_NOT_FOUND, join_command, run_process


def test_captures_stdout_stderr_and_exit_code() -> None:
    """Return both streams and the exit status without raising."""
    code = "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)"
    output = asyncio.run(run_process(sys.executable, ["-c", code]))
    assert output.stdout == "out"
    assert output.stderr == "err"
    assert output.returncode == 3


def test_missing_executable_is_reported() -> None:
    """Report a missing executable through the result instead of raising."""
    output = asyncio.run(run_process("ffprobe-async-definitely-missing", ["-version"]))
    assert output.returncode == EXIT_NOT_FOUND
    assert output.stdout == ""
    assert output.stderr


def test_concurrent_runs_do_not_share_buffers() -> None:
    """Keep each process's output separate when run together."""

    async def scenario() -> list[str]:
        runs = [run_process(sys.executable, ["-c", f"print('clip-{i}' * 2000)"]) for i in range(4)]
        return [o.stdout.strip() for o in await asyncio.gather(*runs)]

    outputs = asyncio.run(scenario())
    assert outputs == [f"clip-{i}" * 2000 for i in range(4)]


def test_join_command_quotes_paths() -> None:
    """Quote arguments containing spaces for display."""
    if sys.platform == "win32":
        assert join_command("ffprobe", ["a b.mp4"]) == 'ffprobe "a b.mp4"'
    else:
        assert join_command("ffprobe", ["-v", "error", "a b.mp4"]) == "ffprobe -v error 'a b.mp4'"


def test_nul_byte_argument_is_reported() -> None:
    """Report an argument the OS cannot pass instead of raising."""
    output = asyncio.run(run_process(sys.executable, ["-c", "print('x')", "clip\x00.mp4"]))
    assert output.returncode == EXIT_NOT_FOUND
    assert output.stdout == ""
    assert "null" in output.stderr
