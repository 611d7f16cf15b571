"""Shared constants for PatternSeeker.

Character sets and numeric limits used by the cursor, the integer scanners
and the structured-text helpers. Kept in one module to give a single
source of truth and avoid circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character sets
    "ASCII_DIGITS",
    "WHITESPACE",
    "NUMBER_LEADING_WHITESPACE",
    "JSON_SCALAR_TERMINATORS",
    "DOUBLE_QUOTE",
    # Integer limits
    "UINT64_MAX",
    "INT64_MIN",
    "INT64_MAX",
]

# ============================================================================
# CHARACTER SETS
# ============================================================================

# Digits 0-9 only. str.isdigit() accepts Unicode digits such as "²",
# which have no place in a decimal integer.
ASCII_DIGITS: str = "0123456789"

# Characters consumed by Cursor.skip_whitespace().
WHITESPACE: str = " \t\n\r"

# Whitespace the integer scanners accept before a number (C isspace set).
NUMBER_LEADING_WHITESPACE: str = " \t\n\v\f\r"

# An unquoted JSON scalar (number, true, false, null) ends at any of these.
JSON_SCALAR_TERMINATORS: str = ", \r\n]}"

DOUBLE_QUOTE: str = '"'

# ============================================================================
# INTEGER LIMITS
# ============================================================================

UINT64_MAX: int = 2**64 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
