"""Integer scanners for cursor views.

Pure functions that read a leading decimal integer from a window of a string
and report what they found together with how many characters they consumed.
No status is kept between calls, so independent cursors can scan from
different threads without interfering with each other.

Grammar (bounded by the window end, never reads past it):
    integer ::= whitespace* sign? digit+
    whitespace ::= " " | "\\t" | "\\n" | "\\v" | "\\f" | "\\r"
    sign ::= "+"          (unsigned)
           | "+" | "-"    (signed)
    digit ::= [0-9]       (ASCII only)

Failure Modes:
    - No digits: value is None and nothing is consumed, not even the
      leading whitespace or sign.
    - Overflow: value is None but every digit counts as consumed.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from patternseeker.constants import (
    ASCII_DIGITS,
    INT64_MAX,
    INT64_MIN,
    NUMBER_LEADING_WHITESPACE,
    UINT64_MAX,
)

__all__ = ["IntegerScan", "scan_signed", "scan_unsigned"]

# Significant digits in UINT64_MAX (18446744073709551615). Longer runs
# overflow without being converted, which also keeps int() clear of
# the interpreter's str-to-int digit limit.
_MAX_SIGNIFICANT_DIGITS: int = 20


@dataclass(frozen=True, slots=True)
class IntegerScan:
    """Outcome of scanning a leading integer.

    Attributes:
        value: Parsed integer, or None if no digits were found or the
            value is out of range
        consumed: Number of characters the scanner moved past

    Example:
        >>> scan_unsigned("42 apples", 0, 9)
        IntegerScan(value=42, consumed=2)
        >>> scan_unsigned("apples", 0, 6)
        IntegerScan(value=None, consumed=0)
    """

    value: int | None
    consumed: int

    @property
    def ok(self) -> bool:
        """True when a value in range was parsed."""
        return self.value is not None


def _scan(
    source: str, start: int, end: int, *, signs: str, lower: int, upper: int
) -> IntegerScan:
    pos = start
    while pos < end and source[pos] in NUMBER_LEADING_WHITESPACE:
        pos += 1

    negative = False
    if pos < end and source[pos] in signs:
        negative = source[pos] == "-"
        pos += 1

    digits_start = pos
    while pos < end and source[pos] in ASCII_DIGITS:
        pos += 1

    if pos == digits_start:
        return IntegerScan(None, 0)

    consumed = pos - start

    significant_start = digits_start
    while significant_start < pos - 1 and source[significant_start] == "0":
        significant_start += 1
    if pos - significant_start > _MAX_SIGNIFICANT_DIGITS:
        return IntegerScan(None, consumed)

    value = int(source[significant_start:pos])
    if negative:
        value = -value
    if not lower <= value <= upper:
        return IntegerScan(None, consumed)
    return IntegerScan(value, consumed)


def scan_unsigned(source: str, start: int, end: int) -> IntegerScan:
    """Scan an unsigned 64-bit integer from source[start:end].

    A leading "-" is not part of the unsigned grammar, so "-5" yields
    IntegerScan(None, 0).

    Args:
        source: Backing string
        start: Window start (inclusive)
        end: Window end (exclusive)

    Returns:
        IntegerScan with the value in [0, 2**64 - 1] or None
    """
    return _scan(source, start, end, signs="+", lower=0, upper=UINT64_MAX)


def scan_signed(source: str, start: int, end: int) -> IntegerScan:
    """Scan a signed 64-bit integer from source[start:end].

    Args:
        source: Backing string
        start: Window start (inclusive)
        end: Window end (exclusive)

    Returns:
        IntegerScan with the value in [-2**63, 2**63 - 1] or None

    Example:
        >>> scan_signed("-12345 remainder", 0, 16)
        IntegerScan(value=-12345, consumed=6)
    """
    return _scan(source, start, end, signs="+-", lower=INT64_MIN, upper=INT64_MAX)
