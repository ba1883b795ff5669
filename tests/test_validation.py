"""Tests for source path validation."""

from pathlib import Path

import pytest

from ffprobe_async.models import SourceError, SourceErrorKind
from ffprobe_async.tools.validation import UNDEFINED, check_exists, validate_source


@pytest.mark.parametrize(
    ("src", "kind"),
    [
        (UNDEFINED, SourceErrorKind.UNDEFINED),
        (None, SourceErrorKind.NULL),
        ("", SourceErrorKind.EMPTY),
        ("   \t\n", SourceErrorKind.WHITESPACE),
        (42, SourceErrorKind.INVALID_TYPE),
    ],
)
def test_rejects_invalid_sources(src: object, kind: SourceErrorKind) -> None:
    """Report the first failing check as a SourceError."""
    result = validate_source(src)
    assert not result.ok
    assert isinstance(result.error, SourceError)
    assert result.error.kind is kind
    assert result.value is None


def test_missing_argument_is_undefined() -> None:
    """Calling without a source counts as undefined."""
    result = validate_source()
    assert isinstance(result.error, SourceError)
    assert result.error.kind is SourceErrorKind.UNDEFINED
    assert str(result.error) == "Path is undefined"


def test_returns_trimmed_path() -> None:
    """Strip surrounding whitespace from valid sources."""
    assert validate_source("  /media/clip.mp4 \n").unwrap() == "/media/clip.mp4"


def test_accepts_path_objects() -> None:
    """Convert PathLike sources to strings."""
    assert validate_source(Path("/media/clip.mp4")).unwrap() == str(Path("/media/clip.mp4"))


def test_check_exists(tmp_path: Path) -> None:
    """Pass through existing paths and reject missing ones."""
    media = tmp_path / "a.mp4"
    media.write_bytes(b"")
    assert check_exists(str(media)).unwrap() == str(media)

    missing = check_exists(str(tmp_path / "missing.mp4"))
    assert isinstance(missing.error, SourceError)
    assert missing.error.kind is SourceErrorKind.PATH_NOT_FOUND
    assert "missing.mp4" in missing.error.message
