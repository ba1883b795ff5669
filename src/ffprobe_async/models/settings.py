"""Configurable defaults read from the environment."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator

from .verbosity import Verbosity

DEFAULT_FFPROBE = "ffprobe"

_ENV_PREFIX = "FFPROBE_ASYNC_"
_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


def _to_bool(v: str | bool | int | None, *, default: bool) -> bool:
    """Map an on/off token to a bool; empty means ``default``."""
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    token = str(v).strip().lower()
    if not token:
        return default
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    raise ValueError(f"Expected a boolean value, got {v!r}")


class Settings(BaseModel):
    """Defaults applied to every :class:`RuntimeContext`."""

    ffprobe: str = Field(default=DEFAULT_FFPROBE, description="ffprobe executable name or path.")
    check_exists: bool = Field(
        default=True,
        description="Fail with PathNotFound before spawning ffprobe when the source is missing.",
    )
    verbosity: Verbosity = Field(default=Verbosity.QUIET, description="Status reporting level.")

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        return Verbosity.parse(v)

    @field_validator("check_exists", mode="before")
    @classmethod
    def _boolify(cls, v: str | bool | int | None) -> bool:
        return _to_bool(v, default=True)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from ``FFPROBE_ASYNC_*`` variables.

        ``FFPROBE_ASYNC_BIN`` selects the executable;
        ``FFPROBE_ASYNC_CHECK_EXISTS`` and ``FFPROBE_ASYNC_VERBOSITY`` map to
        the fields of the same name.
        """
        env = os.environ if environ is None else environ
        data: dict[str, str] = {}
        if bin_path := env.get(f"{_ENV_PREFIX}BIN"):
            data["ffprobe"] = bin_path
        for name in ("check_exists", "verbosity"):
            value = env.get(f"{_ENV_PREFIX}{name.upper()}")
            if value is not None:
                data[name] = value
        return cls.model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, read once from the environment."""
    return Settings.from_env()


__all__ = ["DEFAULT_FFPROBE", "Settings", "get_settings"]
