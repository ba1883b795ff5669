"""Run external commands without blocking the event loop."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import subprocess
from typing import TYPE_CHECKING

from ffprobe_async.models.results import ProcessOutput

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

# Shell convention for "command not found".
EXIT_NOT_FOUND = 127

logger = logging.getLogger(__name__)


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


async def run_process(exe: str | Path, args: Sequence[str | Path]) -> ProcessOutput:
    """Run ``exe`` with ``args`` and capture stdout, stderr and exit code.

    Never raises: a command that cannot be started, because the executable is
    missing or an argument holds a NUL byte, is reported as exit code ``127``
    with the error text on stderr.
    Each call owns its pipes, so concurrent calls share nothing.

    Cancelling the awaiting task does not kill the child process; callers
    that wrap this in a timeout may leave ``exe`` running.
    """
    cmd = [str(exe), *[str(a) for a in args]]
    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            creationflags=creationflags,
        )
    except (OSError, ValueError) as e:
        logger.warning("Failed to start %s: %s", cmd[0], e)
        return ProcessOutput(stdout="", stderr=str(e), returncode=EXIT_NOT_FOUND)
    stdout, stderr = await proc.communicate()
    returncode = proc.returncode if proc.returncode is not None else 0
    logger.debug("%s exited with %s", cmd[0], returncode)
    return ProcessOutput(stdout=_decode(stdout), stderr=_decode(stderr), returncode=returncode)


def quote_arg(arg: str) -> str:
    """Quote argument if needed."""
    if os.name == "nt":
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display."""
    return " ".join(quote_arg(str(part)) for part in (exe, *args))


__all__ = ["EXIT_NOT_FOUND", "join_command", "quote_arg", "run_process"]
