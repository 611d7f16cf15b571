"""Zero-copy text cursor for ad-hoc extraction.

A Cursor is a window (start, end) over an immutable source string plus the
origin of the root window it was derived from. Scans use str.find() and
friends with explicit bounds, so the source is never sliced until a caller
asks for the text of a view.

Design Philosophy:
    - The source str is shared by reference; cursors only move indices
    - Consuming operations narrow the receiver's own window
    - Extractions return a NEW derived cursor sharing source and origin
    - Expected failures never raise: they return False, None, or the
      not-found sentinel (is_not_found is True)
    - Wrong argument kinds do raise (TypeError / ValueError)

Layers:
    - Positioning: expect, starts_with, seek_to, skip
    - Extraction: extract_between, extract_until, extract_until_any_of,
      extract_balanced, extract_fixed, take_*_integer, skip_whitespace
    - Structured text: get_json_property, get_xml_tag, get_xml_tag_body,
      get_xml_attr (see patternseeker.structured)

Example:
    >>> cursor = Cursor('Hello, <name>World</name>!')
    >>> str(cursor.extract_between("<name>", "</name>"))
    'World'
    >>> cursor.seek_to(",", MoveMode.AFTER)
    True
    >>> cursor.get_offset()
    6

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import NamedTuple, Self, TextIO

from patternseeker import structured
from patternseeker.constants import WHITESPACE
from patternseeker.enums import MoveMode
from patternseeker.numbers import scan_signed, scan_unsigned
from patternseeker.validation_helpers import (
    require_char,
    require_length,
    require_literal,
    require_mode,
)

__all__ = ["Cursor", "TextView"]

# Placeholder backing string for the not-found sentinel.
_EMPTY: str = ""


class TextView(NamedTuple):
    """Borrowed view of a cursor: the shared source and the window bounds.

    source[start:end] is the text the cursor exposes. Nothing is copied
    until a caller slices.
    """

    source: str
    start: int
    end: int


class Cursor:
    """Window over an immutable string with scan and extract operations.

    Key Design Decisions:
        1. Slots - cursors are created for every extraction, keep them small
        2. Mutable window - expect/seek_to/skip and the `mode` argument
           narrow the receiver in place; copy() gives an independent cursor
        3. Shared origin - derived cursors report offsets relative to the
           root window, not to themselves
        4. Tri-state results - a successful zero-length match has
           found=True; a failed operation returns a sentinel with
           found=False. Both are is_empty.

    Example:
        >>> root = Cursor("abc def")
        >>> word = root.extract_until(" ", MoveMode.AFTER)
        >>> str(word), str(root)
        ('abc', 'def')
        >>> root.get_offset()
        4
        >>> missing = root.extract_until("!")
        >>> missing.is_not_found, missing.is_empty
        (True, True)
    """

    __slots__ = ("_end", "_found", "_origin", "_source", "_start")

    def __init__(self, source: str, start: int = 0, end: int | None = None) -> None:
        """Create a root cursor over source[start:end].

        Args:
            source: Text to scan (not copied)
            start: Window start, becomes the origin for offsets
            end: Window end (exclusive); defaults to len(source)

        Raises:
            TypeError: If source is not a str
            ValueError: If the bounds are outside the source
        """
        if not isinstance(source, str):
            msg = f"source must be str, got {type(source).__name__}"
            raise TypeError(msg)
        if end is None:
            end = len(source)
        if not 0 <= start <= end <= len(source):
            msg = f"Invalid window [{start}, {end}) for source of length {len(source)}"
            raise ValueError(msg)
        self._source = source
        self._start = start
        self._end = end
        self._origin = start
        self._found = True

    @classmethod
    def _derived(cls, source: str, start: int, end: int, origin: int) -> Self:
        cursor = cls.__new__(cls)
        cursor._source = source
        cursor._start = start
        cursor._end = end
        cursor._origin = origin
        cursor._found = True
        return cursor

    @classmethod
    def not_found(cls) -> Self:
        """Return the sentinel produced by failed operations.

        The sentinel is an empty view over an empty placeholder, so every
        operation remains safe to call on it and reports "not found".
        """
        cursor = cls._derived(_EMPTY, 0, 0, 0)
        cursor._found = False
        return cursor

    def _derive(self, start: int, end: int) -> Cursor:
        return Cursor._derived(self._source, start, end, self._origin)

    def _move(self, mode: MoveMode, before: int, after: int) -> None:
        if mode is MoveMode.BEFORE:
            self._start = before
        elif mode is MoveMode.AFTER:
            self._start = after

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def source(self) -> str:
        """The shared backing string."""
        return self._source

    @property
    def view(self) -> TextView:
        """Borrowed (source, start, end) form of the current window."""
        return TextView(self._source, self._start, self._end)

    @property
    def found(self) -> bool:
        """False only for the sentinel returned by a failed operation."""
        return self._found

    @property
    def is_not_found(self) -> bool:
        return not self._found

    @property
    def size(self) -> int:
        """Number of characters in the window."""
        return self._end - self._start

    def __len__(self) -> int:
        return self._end - self._start

    @property
    def is_empty(self) -> bool:
        """True for a zero-length window, whether matched or not found."""
        return self._start == self._end

    @property
    def is_not_empty(self) -> bool:
        return self._start != self._end

    def copy(self) -> Cursor:
        """Return an independent cursor over the same window."""
        cursor = self._derive(self._start, self._end)
        cursor._found = self._found
        return cursor

    __copy__ = copy

    def slice(self, start: int = 0, stop: int | None = None) -> Cursor:
        """Return a derived cursor over view[start:stop].

        Indices are relative to the current window and clamped to it like
        str slicing with non-negative bounds. The receiver does not move.

        Example:
            >>> str(Cursor("Hello, World!").slice(7, 12))
            'World'
        """
        start = min(require_length(start, "start"), self.size)
        stop = self.size if stop is None else min(require_length(stop, "stop"), self.size)
        stop = max(stop, start)
        return self._derive(self._start + start, self._start + stop)

    # ------------------------------------------------------------------
    # Positioning
    # ------------------------------------------------------------------

    def expect(self, literal: str) -> bool:
        """Consume literal if the window starts with it.

        Returns:
            True and advances past literal on a match, False otherwise
            (window unchanged)

        Example:
            >>> cursor = Cursor("Hello, World!")
            >>> cursor.expect("Hello")
            True
            >>> str(cursor)
            ', World!'
            >>> cursor.expect("Goodbye")
            False
        """
        require_literal(literal, "literal")
        if self._source.startswith(literal, self._start, self._end):
            self._start += len(literal)
            return True
        return False

    def starts_with(self, literal: str) -> bool:
        """Check whether the window starts with literal. Never moves."""
        require_literal(literal, "literal")
        return self._source.startswith(literal, self._start, self._end)

    def seek_to(self, literal: str, mode: MoveMode | str = MoveMode.NONE) -> bool:
        """Find the first occurrence of literal in the window.

        Args:
            literal: Text to look for
            mode: NONE leaves the window alone, BEFORE moves to the match,
                AFTER moves just past it

        Returns:
            True if literal was found; False leaves the window unchanged
        """
        require_literal(literal, "literal")
        mode = require_mode(mode)
        pos = self._source.find(literal, self._start, self._end)
        if pos < 0:
            return False
        self._move(mode, pos, pos + len(literal))
        return True

    def skip(self, count: int) -> None:
        """Advance the window by count characters (clamped to its end)."""
        require_length(count, "count")
        self._start = min(self._start + count, self._end)

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def extract_between(
        self, start: str, stop: str, mode: MoveMode | str = MoveMode.NONE
    ) -> Cursor:
        """Extract the text strictly between start and the next stop.

        The first occurrence of start is used, and stop is searched for
        only after it ends. Earlier or overlapping occurrences of start are
        never considered.

        Args:
            start: Opening delimiter
            stop: Closing delimiter
            mode: BEFORE moves to the opening delimiter, AFTER moves past
                the closing one

        Returns:
            Derived cursor over the text between the delimiters, or the
            not-found sentinel if either is missing

        Example:
            >>> cursor = Cursor("Hello, <name>World</name>!")
            >>> str(cursor.extract_between("<name>", "</name>"))
            'World'
        """
        require_literal(start, "start")
        require_literal(stop, "stop")
        mode = require_mode(mode)
        opening = self._source.find(start, self._start, self._end)
        if opening < 0:
            return Cursor.not_found()
        inner = opening + len(start)
        closing = self._source.find(stop, inner, self._end)
        if closing < 0:
            return Cursor.not_found()
        result = self._derive(inner, closing)
        self._move(mode, opening, closing + len(stop))
        return result

    def extract_until(self, stop: str, mode: MoveMode | str = MoveMode.NONE) -> Cursor:
        """Extract from the window start up to (excluding) the first stop.

        Example:
            >>> str(Cursor("Hello, World!").extract_until("World"))
            'Hello, '
        """
        require_literal(stop, "stop")
        mode = require_mode(mode)
        closing = self._source.find(stop, self._start, self._end)
        if closing < 0:
            return Cursor.not_found()
        result = self._derive(self._start, closing)
        self._move(mode, closing, closing + len(stop))
        return result

    def extract_until_any_of(
        self, chars: str, mode: MoveMode | str = MoveMode.NONE
    ) -> Cursor:
        """Extract up to the first character that belongs to chars.

        chars is a set of terminators, not a literal. Only AFTER moves the
        window (past the terminator, by one character); BEFORE is a no-op.

        Example:
            >>> cursor = Cursor("30, 40")
            >>> str(cursor.extract_until_any_of(" ,", MoveMode.AFTER)), str(cursor)
            ('30', ' 40')
        """
        require_literal(chars, "chars")
        mode = require_mode(mode)
        terminator = self._end
        for char in set(chars):
            pos = self._source.find(char, self._start, terminator)
            if pos >= 0:
                terminator = pos
        if terminator == self._end:
            return Cursor.not_found()
        result = self._derive(self._start, terminator)
        if mode is MoveMode.AFTER:
            self._start = terminator + 1
        return result

    def extract_balanced(
        self, open_char: str, close_char: str, mode: MoveMode | str = MoveMode.NONE
    ) -> Cursor:
        """Extract a bracketed span including nested pairs of the same kind.

        Finds the first open_char and scans forward with a depth counter
        until the matching close_char. Both delimiters are included.

        Args:
            open_char: Opening bracket (one character)
            close_char: Closing bracket (one character, different from open_char)
            mode: BEFORE moves to the opening bracket, AFTER moves past the
                closing one

        Returns:
            Derived cursor over the whole bracketed span, or the not-found
            sentinel if there is no open_char or the nesting never closes

        Example:
            >>> cursor = Cursor('{"a": {"b": 1}} tail')
            >>> str(cursor.extract_balanced("{", "}"))
            '{"a": {"b": 1}}'
        """
        require_char(open_char, "open_char")
        require_char(close_char, "close_char")
        if open_char == close_char:
            msg = f"open_char and close_char must differ, got {open_char!r} twice"
            raise ValueError(msg)
        mode = require_mode(mode)

        source = self._source
        opening = source.find(open_char, self._start, self._end)
        if opening < 0:
            return Cursor.not_found()

        depth = 1
        pos = opening + 1
        while pos < self._end:
            char = source[pos]
            pos += 1
            if char == open_char:
                depth += 1
            elif char == close_char:
                depth -= 1
                if depth == 0:
                    break
        if depth != 0:
            return Cursor.not_found()

        result = self._derive(opening, pos)
        self._move(mode, opening, pos)
        return result

    def extract_fixed(self, length: int, mode: MoveMode | str = MoveMode.NONE) -> Cursor:
        """Extract exactly length characters from the window start.

        A length beyond the window is truncated to what remains. Only
        AFTER moves the window; BEFORE would not move it anyway.
        """
        require_length(length, "length")
        mode = require_mode(mode)
        stop = min(self._start + length, self._end)
        result = self._derive(self._start, stop)
        if mode is MoveMode.AFTER:
            self._start = stop
        return result

    # ------------------------------------------------------------------
    # Scalars and whitespace
    # ------------------------------------------------------------------

    def take_unsigned_integer(self, default: int | None = None) -> int | None:
        """Parse a leading unsigned 64-bit integer and advance past it.

        The window advances by whatever the scanner consumed, including on
        overflow. With no digits nothing is consumed.

        Args:
            default: Returned instead of None on failure

        Example:
            >>> cursor = Cursor("12345 remainder")
            >>> cursor.take_unsigned_integer()
            12345
            >>> str(cursor)
            ' remainder'
        """
        scan = scan_unsigned(self._source, self._start, self._end)
        self._start += scan.consumed
        return scan.value if scan.ok else default

    def take_signed_integer(self, default: int | None = None) -> int | None:
        """Parse a leading signed 64-bit integer and advance past it."""
        scan = scan_signed(self._source, self._start, self._end)
        self._start += scan.consumed
        return scan.value if scan.ok else default

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs, newlines and carriage returns."""
        source = self._source
        pos = self._start
        while pos < self._end and source[pos] in WHITESPACE:
            pos += 1
        self._start = pos

    # ------------------------------------------------------------------
    # Structured text
    # ------------------------------------------------------------------

    def get_json_property(self, name: str) -> Cursor:
        """Value of JSON property name (string contents, array, object or scalar)."""
        return structured.json_property(self, name)

    def get_xml_tag_body(self, name: str, mode: MoveMode | str = MoveMode.NONE) -> Cursor:
        """Contents of the first <name ...>...</name> element."""
        return structured.xml_tag_body(self, name, mode)

    def get_xml_tag(self, name: str, mode: MoveMode | str = MoveMode.NONE) -> Cursor:
        """Whole first <name ...>...</name> element, tags included."""
        return structured.xml_tag(self, name, mode)

    def get_xml_attr(self, name: str) -> Cursor:
        """Double-quoted value of attribute name."""
        return structured.xml_attr(self, name)

    # ------------------------------------------------------------------
    # Offsets
    # ------------------------------------------------------------------

    def get_original_position(self) -> int:
        """Distance from the root window start to this window's start."""
        return self._start - self._origin

    def get_offset(self) -> int:
        """How far the cursor has advanced from the root window start.

        Same value as get_original_position(). Useful for committing a
        consumed prefix of an input buffer.
        """
        return self._start - self._origin

    def compute_line_col(self) -> tuple[int, int]:
        """Compute the 1-based (line, column) of the window start.

        Lines and columns count from the root window start. Only LF ends
        a line (CRLF works, CR-only does not).

        Example:
            >>> cursor = Cursor("line1\\nline2")
            >>> cursor.seek_to("ne2", MoveMode.BEFORE)
            True
            >>> cursor.compute_line_col()
            (2, 3)
        """
        line = self._source.count("\n", self._origin, self._start) + 1
        last_newline = self._source.rfind("\n", self._origin, self._start)
        if last_newline >= 0:
            return (line, self._start - last_newline)
        return (line, self._start - self._origin + 1)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Return a copy of the window text."""
        return self._source[self._start : self._end]

    def __str__(self) -> str:
        return self._source[self._start : self._end]

    def write_to(self, stream: TextIO) -> int:
        """Write the window text to stream and return the characters written."""
        return stream.write(self._source[self._start : self._end])

    def __repr__(self) -> str:
        if not self._found:
            return "Cursor(<not found>)"
        return f"Cursor({self.to_string()!r}, offset={self.get_offset()})"
