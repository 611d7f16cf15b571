"""JSON and XML extraction helpers built from cursor primitives.

These are textual shortcuts, not parsers:
    - JSON keys must appear double-quoted exactly as "key"
    - No escape decoding: an escaped quote inside a JSON string ends the
      extracted value early
    - XML matching is purely textual (no namespaces, entities, self-closing
      tags or nested elements of the same name)
    - "<name" matches as a prefix, so looking up "name" can hit <names>
    - Attribute values must be double-quoted

Every helper returns a derived cursor sharing the receiver's origin, or the
not-found sentinel. Only get_xml_tag / get_xml_tag_body move the receiver,
and only when asked to through `mode`.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from patternseeker.constants import DOUBLE_QUOTE, JSON_SCALAR_TERMINATORS
from patternseeker.enums import MoveMode
from patternseeker.validation_helpers import require_literal, require_mode

if TYPE_CHECKING:
    from patternseeker.cursor import Cursor

__all__ = ["json_property", "xml_attr", "xml_tag", "xml_tag_body"]


def json_property(cursor: Cursor, name: str) -> Cursor:
    """Return the value of JSON property name.

    Works on a copy, so the receiver never moves. After "name", optional
    whitespace, ":" and optional whitespace, the value is:
        - a string: the text between the quotes (quotes excluded)
        - an array or object: the balanced [...] / {...} span
        - anything else: text up to the first of , space CR LF ] }

    Example:
        >>> from patternseeker import Cursor
        >>> doc = Cursor('{"name": "John", "age": 30}')
        >>> str(json_property(doc, "name")), str(json_property(doc, "age"))
        ('John', '30')
    """
    require_literal(name, "name")
    rest = cursor.copy()
    if not rest.seek_to(DOUBLE_QUOTE + name + DOUBLE_QUOTE, MoveMode.AFTER):
        return cursor.not_found()

    rest.skip_whitespace()
    if not rest.expect(":"):
        return cursor.not_found()
    rest.skip_whitespace()

    if rest.expect(DOUBLE_QUOTE):
        return rest.extract_until(DOUBLE_QUOTE)
    if rest.starts_with("["):
        return rest.extract_balanced("[", "]")
    if rest.starts_with("{"):
        return rest.extract_balanced("{", "}")
    return rest.extract_until_any_of(JSON_SCALAR_TERMINATORS)


def xml_tag(cursor: Cursor, name: str, mode: MoveMode | str = MoveMode.NONE) -> Cursor:
    """Return the whole element <name ...>...</name>, both tags included.

    Uses the nearest "<name" and the nearest "</name>" after it.

    Args:
        cursor: Receiver; moved only according to mode
        name: Tag name
        mode: BEFORE moves to "<name", AFTER moves past "</name>"
    """
    require_literal(name, "name")
    mode = require_mode(mode)
    open_tag = "<" + name
    close_tag = "</" + name + ">"

    before = cursor.copy()
    inner = cursor.extract_between(open_tag, close_tag, mode)
    if inner.is_not_found:
        return inner

    base = before.view.start
    return before.slice(
        inner.view.start - len(open_tag) - base,
        inner.view.end + len(close_tag) - base,
    )


def xml_tag_body(
    cursor: Cursor, name: str, mode: MoveMode | str = MoveMode.NONE
) -> Cursor:
    """Return the contents of element name, without its tags.

    The body starts after the first ">" of the element and ends at the
    last "</name>" inside it.

    Example:
        >>> from patternseeker import Cursor
        >>> doc = Cursor("<root><name>John</name><age>30</age></root>")
        >>> str(xml_tag_body(doc, "name"))
        'John'
    """
    tag = xml_tag(cursor, name, mode)
    if tag.is_not_found:
        return tag

    source, start, end = tag.view
    body_start = source.find(">", start, end) + 1
    body_end = source.rfind("</" + name + ">", body_start, end)
    if body_end < 0:
        return cursor.not_found()
    return tag.slice(body_start - start, body_end - start)


def xml_attr(cursor: Cursor, name: str) -> Cursor:
    """Return the double-quoted value of attribute name.

    Works on a copy. The "=" between the name and the value is consumed
    when present but not required.

    Example:
        >>> from patternseeker import Cursor
        >>> tag = Cursor('<tag id="123" class="example">content</tag>')
        >>> str(xml_attr(tag, "class"))
        'example'
    """
    require_literal(name, "name")
    probe = cursor.copy()
    if not probe.seek_to(name, MoveMode.AFTER):
        return cursor.not_found()
    probe.skip_whitespace()
    probe.expect("=")
    probe.skip_whitespace()
    return probe.extract_between(DOUBLE_QUOTE, DOUBLE_QUOTE)
