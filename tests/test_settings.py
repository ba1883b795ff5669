"""Tests for configuration and runtime context."""

import pytest

from ffprobe_async.models import RuntimeContext, Settings, Verbosity, get_settings


def test_defaults() -> None:
    """Use plain ``ffprobe`` with existence checks and no status output."""
    cfg = Settings.from_env({})
    assert cfg.ffprobe == "ffprobe"
    assert cfg.check_exists is True
    assert cfg.verbosity is Verbosity.QUIET


def test_from_env() -> None:
    """Read ``FFPROBE_ASYNC_*`` variables."""
    cfg = Settings.from_env(
        {
            "FFPROBE_ASYNC_BIN": "/usr/local/bin/ffprobe",
            "FFPROBE_ASYNC_CHECK_EXISTS": "no",
            "FFPROBE_ASYNC_VERBOSITY": "commands",
        }
    )
    assert cfg.ffprobe == "/usr/local/bin/ffprobe"
    assert cfg.check_exists is False
    assert cfg.verbosity is Verbosity.COMMANDS


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Build the cached settings from the process environment."""
    monkeypatch.setenv("FFPROBE_ASYNC_VERBOSITY", "2")
    get_settings.cache_clear()
    assert get_settings().verbosity is Verbosity.OUTPUT
    ctx = RuntimeContext.from_settings()
    assert ctx.verbosity is Verbosity.OUTPUT
    assert ctx.runner is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (Verbosity.OUTPUT, Verbosity.OUTPUT),
        (1, Verbosity.COMMANDS),
        ("Quiet", Verbosity.QUIET),
        (" 2 ", Verbosity.OUTPUT),
    ],
)
def test_verbosity_parse(raw: object, expected: Verbosity) -> None:
    """Accept members, integers and case-insensitive names."""
    assert Verbosity.parse(raw) is expected


@pytest.mark.parametrize("raw", ["loud", 7, None])
def test_verbosity_parse_rejects(raw: object) -> None:
    """Reject unknown verbosity values."""
    with pytest.raises(ValueError):
        Verbosity.parse(raw)


def test_invalid_env_verbosity() -> None:
    """Surface bad configuration as a validation error."""
    with pytest.raises(ValueError):
        Settings.from_env({"FFPROBE_ASYNC_VERBOSITY": "loud"})


@pytest.mark.parametrize(("raw", "expected"), [("off", False), ("ON", True), ("", True), (" 0 ", False)])
def test_check_exists_tokens(raw: str, expected: bool) -> None:
    """Accept on/off tokens; an empty value keeps the default."""
    assert Settings.from_env({"FFPROBE_ASYNC_CHECK_EXISTS": raw}).check_exists is expected


@pytest.mark.parametrize("raw", ["enabled", "ture"])
def test_invalid_env_check_exists(raw: str) -> None:
    """Reject unknown tokens rather than silently disabling the check."""
    with pytest.raises(ValueError):
        Settings.from_env({"FFPROBE_ASYNC_CHECK_EXISTS": raw})
