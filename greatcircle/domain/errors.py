"""Errors raised while turning command-line input into coordinates."""

from __future__ import annotations

USAGE = "Usage: haversine lat1 lon1 lat2 lon2"


class UsageError(ValueError):
    """Wrong number of arguments (or an unknown option) on the command line."""

    def __init__(self, message: str = USAGE):
        super().__init__(message)


class InvalidNumericArgumentError(ValueError):
    """A coordinate argument could not be parsed as a finite number."""

    def __init__(self, name: str, raw: str):
        self.name = name
        self.raw = raw
        super().__init__(f"invalid numeric argument for {name}: {raw!r}")
