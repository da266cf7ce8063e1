"""Exceptions raised by the loot-table sampler."""

from __future__ import annotations

from typing import Optional


class LootbagError(Exception):
    """Base class for every error raised by this package."""


class PathNotFoundError(LootbagError, LookupError):
    """A branch path that the caller asserted exists could not be followed.

    Attributes:
        path: The full path that was requested
        segment: The segment that failed mid-walk, if any
    """

    def __init__(self, path: str, segment: Optional[str] = None) -> None:
        if segment is None:
            message = f"this path does not exist: {path!r}"
        else:
            message = f"this branch does not exist: {segment!r} (in {path!r})"
        super().__init__(message)
        self.path = path
        self.segment = segment


class BagSyntaxError(LootbagError, ValueError):
    """Malformed catalog notation handed to the bag parser."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.message = message
        self.line = line
