"""Argument checks shared by the cursor and the structured-text helpers.

Literal strings, single terminator characters and lengths are kept as
distinct argument kinds. A call that passes one where another is expected
(an int where a literal belongs, a two-character string where a bracket
belongs) is a programming error and raises immediately instead of being
coerced into a silently wrong scan.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from patternseeker.enums import MoveMode

__all__ = ["require_char", "require_length", "require_literal", "require_mode"]


def require_literal(value: object, name: str) -> str:
    """Return value if it is a str, else raise TypeError.

    Empty strings are accepted and behave like str.find(""): they match
    at the current position.
    """
    if not isinstance(value, str):
        msg = f"{name} must be str, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def require_char(value: object, name: str) -> str:
    """Return value if it is a single-character str."""
    if not isinstance(value, str):
        msg = f"{name} must be a single-character str, got {type(value).__name__}"
        raise TypeError(msg)
    if len(value) != 1:
        msg = f"{name} must be exactly one character, got {value!r}"
        raise ValueError(msg)
    return value


def require_length(value: object, name: str) -> int:
    """Return value if it is a non-negative int (bool is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be int, got {type(value).__name__}"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
    return value


def require_mode(value: object) -> MoveMode:
    """Convert value to a MoveMode member.

    Accepts members and their string values ("none", "move_before",
    "move_after").
    """
    try:
        return MoveMode(value)
    except ValueError:
        choices = ", ".join(repr(m.value) for m in MoveMode)
        msg = f"mode must be one of {choices}, got {value!r}"
        raise ValueError(msg) from None
