"""Status emission helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

from ffprobe_async.models.verbosity import Verbosity

logger = logging.getLogger(__name__)


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    The caller controls where status lines go:

    * ``print`` - used by the CLI for direct terminal output.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for applications or tests that
      capture status output.
    """
    if status_callback is None:
        logger.info(message)
        return
    if status_callback is print:
        print(message, flush=True)  # noqa: T201
        return
    status_callback(message)


def maybe_log_command(
    *,
    verbosity: Verbosity,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner when verbosity is at least ``Verbosity.COMMANDS``."""
    if verbosity >= Verbosity.COMMANDS:
        emit_status(banner, status_callback=status_callback)


def maybe_log_output(
    output: str,
    *,
    verbosity: Verbosity,
    status_callback: Callable[[str], None] | None,
) -> None:
    """Forward raw tool output line by line at ``Verbosity.OUTPUT``."""
    if verbosity < Verbosity.OUTPUT:
        return
    for line in output.splitlines():
        emit_status(line, status_callback=status_callback)


__all__ = ["emit_status", "maybe_log_command", "maybe_log_output"]
