"""Source path checks performed before ffprobe is spawned."""

from __future__ import annotations

import os
from typing import Final

from ffprobe_async.models.errors import SourceError
from ffprobe_async.models.results import ProbeResult
from ffprobe_async.models.types import SourceErrorKind


class _Undefined:
    """Marker for an argument the caller never supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()

_MESSAGES = {
    SourceErrorKind.UNDEFINED: "Path is undefined",
    SourceErrorKind.NULL: "Path is None",
    SourceErrorKind.EMPTY: "Path is empty",
    SourceErrorKind.WHITESPACE: "Path is whitespace",
}


def _reject(kind: SourceErrorKind, message: str | None = None) -> ProbeResult[str]:
    return ProbeResult.failure(SourceError(kind, message or _MESSAGES[kind]))


def validate_source(src: object = UNDEFINED) -> ProbeResult[str]:
    """Return the trimmed source path or a :class:`SourceError`.

    Checks run in order: undefined, ``None``, empty, whitespace-only. Path
    objects are accepted and converted with :func:`os.fspath`. No I/O.
    """
    if src is UNDEFINED:
        return _reject(SourceErrorKind.UNDEFINED)
    if src is None:
        return _reject(SourceErrorKind.NULL)
    if isinstance(src, os.PathLike):
        src = os.fspath(src)
    if not isinstance(src, str):
        return _reject(SourceErrorKind.INVALID_TYPE, f"Path must be a string, got {type(src).__name__}")
    if src == "":
        return _reject(SourceErrorKind.EMPTY)
    trimmed = src.strip()
    if not trimmed:
        return _reject(SourceErrorKind.WHITESPACE)
    return ProbeResult.success(trimmed)


def check_exists(path: str) -> ProbeResult[str]:
    """Fail with ``PATH_NOT_FOUND`` unless ``path`` exists on disk."""
    if not os.path.exists(path):
        return _reject(SourceErrorKind.PATH_NOT_FOUND, f"Path does not exist: {path}")
    return ProbeResult.success(path)


__all__ = ["UNDEFINED", "check_exists", "validate_source"]
