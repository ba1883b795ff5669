"""Runtime context shared by the probe operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .settings import Settings, get_settings
from .verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from .results import ProcessOutput

    Runner = Callable[[str, Sequence[str]], Awaitable[ProcessOutput]]


@dataclass(slots=True)
class RuntimeContext:
    """Runtime flags for probing.

    The context is read-only during a probe, so one instance can serve any
    number of concurrent calls. ``runner`` replaces the subprocess layer,
    mainly for tests; ``None`` means :func:`ffprobe_async.tools.cli.run_process`.
    """

    verbosity: Verbosity = Verbosity.QUIET
    status_callback: Callable[[str], None] | None = None
    ffprobe: str = "ffprobe"
    check_exists: bool = True
    runner: Runner | None = field(default=None, repr=False)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        status_callback: Callable[[str], None] | None = None,
        runner: Runner | None = None,
    ) -> RuntimeContext:
        """Create a context from ``settings`` (the environment by default)."""
        cfg = settings or get_settings()
        return cls(
            verbosity=cfg.verbosity,
            status_callback=status_callback,
            ffprobe=cfg.ffprobe,
            check_exists=cfg.check_exists,
            runner=runner,
        )


__all__ = ["RuntimeContext"]
