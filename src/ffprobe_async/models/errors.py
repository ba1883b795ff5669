"""Error taxonomy for probe operations.

Every public operation reports failures as one of these exceptions carried
inside a :class:`~ffprobe_async.models.results.ProbeResult`. They are only
raised when a caller asks for it through ``ProbeResult.unwrap()``.
"""

from __future__ import annotations

from .types import SourceErrorKind


class ProbeError(Exception):
    """Base class for every probe failure."""

    def __init__(self, message: str) -> None:
        """Store ``message`` for display and comparison."""
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        """Compare errors by type and payload."""
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        """Hash by type and message."""
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        """Return ``ClassName('message')``."""
        return f"{type(self).__name__}({self.message!r})"


class SourceError(ProbeError):
    """Invalid or missing input path, detected before any subprocess runs."""

    def __init__(self, kind: SourceErrorKind, message: str) -> None:
        """Record the rejection ``kind`` alongside the message."""
        super().__init__(message)
        self.kind = kind


class ToolError(ProbeError):
    """ffprobe wrote to its error stream.

    ``stderr`` holds the raw text verbatim; the exit code is kept for
    diagnostics only since any stderr output counts as a failure.
    """

    def __init__(self, stderr: str, returncode: int | None = None) -> None:
        """Keep ``stderr`` exactly as the tool produced it."""
        super().__init__(stderr)
        self.stderr = stderr
        self.returncode = returncode


class MalformedDuration(ProbeError):
    """A duration string was not ``HH:MM:SS.ff`` shaped."""

    def __init__(self, text: str, reason: str = "expected 3 colon-separated segments") -> None:
        """Describe the offending ``text``."""
        super().__init__(f"Malformed duration string {text!r}: {reason}")
        self.text = text


class MalformedJson(ProbeError):
    """ffprobe's info output did not parse as a JSON object."""

    def __init__(self, text: str, reason: str) -> None:
        """Describe the decode failure."""
        super().__init__(f"Malformed ffprobe JSON output: {reason}")
        self.text = text


__all__ = [
    "MalformedDuration",
    "MalformedJson",
    "ProbeError",
    "SourceError",
    "ToolError",
]
