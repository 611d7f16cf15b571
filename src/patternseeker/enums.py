"""Enumerations for PatternSeeker.

Uses StrEnum (Python 3.11+) so members compare equal to their string values
and can be passed straight from a command line.

Python 3.13+.
"""

from enum import StrEnum


class MoveMode(StrEnum):
    """Where a scan or extraction leaves the invoking cursor.

    StrEnum provides automatic string conversion: str(MoveMode.AFTER) == "move_after"
    """

    NONE = "none"
    """Leave the cursor where it was."""

    BEFORE = "move_before"
    """Narrow the cursor to start at the match (or its opening delimiter)."""

    AFTER = "move_after"
    """Narrow the cursor to start just past the match (or its closing delimiter)."""


__all__ = [
    "MoveMode",
]
