"""Command-line option models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cyclopts import Group, Parameter
from pydantic import BaseModel, Field, field_validator

from .context import RuntimeContext
from .settings import get_settings
from .verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable

RUNTIME_GROUP = Group.create_ordered("Runtime")


@Parameter(name="*", group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """Runtime behavior options shared by every sub-command."""

    verbosity: Verbosity | None = Field(
        default=None,
        description="Commands: show ffprobe commands; Output: also show ffprobe output.",
    )
    ffprobe: str | None = Field(default=None, description="ffprobe executable to run.")
    check_exists: bool | None = Field(
        default=None,
        description="Fail early when the source path does not exist.",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity | None:
        """Allow ``--verbosity commands`` as well as ``--verbosity 1``."""
        if v is None:
            return None
        return Verbosity.parse(v)

    def to_context(self, status_callback: Callable[[str], None] | None = None) -> RuntimeContext:
        """Overlay explicitly given options on the environment settings."""
        cfg = get_settings()
        return RuntimeContext(
            verbosity=cfg.verbosity if self.verbosity is None else self.verbosity,
            status_callback=status_callback,
            ffprobe=self.ffprobe or cfg.ffprobe,
            check_exists=cfg.check_exists if self.check_exists is None else self.check_exists,
        )


__all__ = ["RUNTIME_GROUP", "RuntimeOptions"]
