"""Tests for the integer scanners and Cursor.take_*_integer().

Python 3.13+.
"""

from __future__ import annotations

import threading

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from patternseeker import Cursor, IntegerScan, scan_signed, scan_unsigned
from patternseeker.constants import INT64_MAX, INT64_MIN, UINT64_MAX


class TestScanUnsigned:
    """scan_unsigned()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12345 remainder", IntegerScan(12345, 5)),
            ("0", IntegerScan(0, 1)),
            ("  \t42x", IntegerScan(42, 5)),
            ("+7", IntegerScan(7, 2)),
            ("007", IntegerScan(7, 3)),
            ("18446744073709551615", IntegerScan(UINT64_MAX, 20)),
        ],
    )
    def test_valid(self, text: str, expected: IntegerScan) -> None:
        """Leading whitespace and '+' are part of the consumed prefix."""
        assert scan_unsigned(text, 0, len(text)) == expected

    @pytest.mark.parametrize("text", ["not_a_number", "", "   ", "+", "-5", "²"])
    def test_no_digits_consumes_nothing(self, text: str) -> None:
        """No digits: value None, nothing consumed."""
        assert scan_unsigned(text, 0, len(text)) == IntegerScan(None, 0)

    def test_overflow_consumes_digits(self) -> None:
        """Overflow fails but consumes every digit."""
        text = "18446744073709551616 tail"

        assert scan_unsigned(text, 0, len(text)) == IntegerScan(None, 20)

    def test_huge_digit_run(self) -> None:
        """Very long runs overflow without tripping int() limits."""
        text = "9" * 10_000

        assert scan_unsigned(text, 0, len(text)) == IntegerScan(None, 10_000)

    def test_many_leading_zeros(self) -> None:
        """Leading zeros do not count toward overflow."""
        text = "0" * 5_000 + "1"

        assert scan_unsigned(text, 0, len(text)) == IntegerScan(1, 5_001)

    def test_bounded_by_window(self) -> None:
        """Digits past the window end are never read."""
        assert scan_unsigned("123456", 1, 3) == IntegerScan(23, 2)

    def test_ok_flag(self) -> None:
        """ok is true only when a value in range was parsed."""
        assert scan_unsigned("42", 0, 2).ok
        assert scan_unsigned("0", 0, 1).ok
        assert not scan_unsigned("x", 0, 1).ok
        assert not scan_unsigned("18446744073709551616", 0, 20).ok


class TestScanSigned:
    """scan_signed()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-12345 remainder", IntegerScan(-12345, 6)),
            ("+12", IntegerScan(12, 3)),
            (" -0", IntegerScan(0, 3)),
            ("9223372036854775807", IntegerScan(INT64_MAX, 19)),
            ("-9223372036854775808", IntegerScan(INT64_MIN, 20)),
        ],
    )
    def test_valid(self, text: str, expected: IntegerScan) -> None:
        """Signs and range limits."""
        assert scan_signed(text, 0, len(text)) == expected

    @pytest.mark.parametrize("text", ["9223372036854775808", "-9223372036854775809"])
    def test_overflow(self, text: str) -> None:
        """Values outside int64 fail after consuming everything."""
        assert scan_signed(text, 0, len(text)) == IntegerScan(None, len(text))

    @pytest.mark.parametrize("text", ["not_a_number", "-", "--1", "- 1"])
    def test_no_digits(self, text: str) -> None:
        """A sign without digits consumes nothing."""
        assert scan_signed(text, 0, len(text)) == IntegerScan(None, 0)

    @given(value=st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
    @settings(max_examples=200)
    def test_in_range_values(self, value: int) -> None:
        """PROPERTY: every int64 rendered in decimal scans back."""
        text = str(value)

        assert scan_signed(text, 0, len(text)) == IntegerScan(value, len(text))


class TestCursorIntegers:
    """take_unsigned_integer() / take_signed_integer()."""

    def test_take_uint64(self) -> None:
        """Value returned and view advanced."""
        cursor = Cursor("12345 remainder")

        assert cursor.take_unsigned_integer() == 12345
        assert cursor.to_string() == " remainder"

    def test_take_uint64_failure(self) -> None:
        """Non-numeric input: None and no movement."""
        cursor = Cursor("not_a_number")

        assert cursor.take_unsigned_integer() is None
        assert cursor.get_offset() == 0

    def test_zero_is_not_failure(self) -> None:
        """A parsed 0 is returned, not replaced by the default."""
        cursor = Cursor("0;-0")

        assert cursor.take_unsigned_integer(default=99) == 0
        cursor.expect(";")
        assert cursor.take_signed_integer(default=99) == 0

    def test_take_int64(self) -> None:
        """Signed value and view advanced."""
        cursor = Cursor("-12345 remainder")

        assert cursor.take_signed_integer() == -12345
        assert cursor.to_string() == " remainder"
        assert Cursor("not_a_number").take_signed_integer() is None

    def test_default(self) -> None:
        """The default replaces None but movement is unchanged."""
        cursor = Cursor("99999999999999999999x")

        assert cursor.take_unsigned_integer(7) == 7
        assert str(cursor) == "x"
        assert Cursor("abc").take_signed_integer(-1) == -1

    def test_sequence_of_numbers(self) -> None:
        """Numbers separated by commas."""
        cursor = Cursor("1, 22, 333")
        values = []
        while True:
            values.append(cursor.take_unsigned_integer())
            if not cursor.expect(","):
                break

        assert values == [1, 22, 333]

    def test_stays_within_window(self) -> None:
        """Parsing stops at the window end even if digits follow."""
        cursor = Cursor("12|34").extract_until("|")

        assert cursor.take_unsigned_integer() == 12
        assert cursor.is_empty

    def test_concurrent_cursors(self) -> None:
        """Independent cursors parse correctly from many threads."""
        errors: list[str] = []

        def worker(n: int) -> None:
            for i in range(200):
                text = f"{n * 1000 + i} "
                cursor = Cursor(text if i % 2 else "x" + text)
                got = cursor.take_unsigned_integer()
                expected = n * 1000 + i if i % 2 else None
                if got != expected:
                    errors.append(f"{n}/{i}: {got!r}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
