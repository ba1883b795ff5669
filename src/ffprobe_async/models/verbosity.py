"""Verbosity levels for probe logging."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much of each probe is reported through the status callback."""

    QUIET = 0
    COMMANDS = 1
    OUTPUT = 2

    @classmethod
    def parse(cls, v: object) -> "Verbosity":
        """Accept enum members, integers, or case-insensitive names.

        Allows ``FFPROBE_ASYNC_VERBOSITY=commands`` as well as
        ``FFPROBE_ASYNC_VERBOSITY=1``.
        """
        if isinstance(v, cls):
            return v
        if isinstance(v, int):
            return cls(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return cls[token.upper()]
            except KeyError:
                try:
                    return cls(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, output, or 0/1/2")


__all__ = ["Verbosity"]
