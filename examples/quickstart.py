"""Quickstart - PatternSeeker in a few minutes.

Demonstrates the three layers of the cursor API:

1. Positioning: expect, starts_with, seek_to
2. Extraction: delimited text, balanced brackets, integers
3. Structured text: JSON properties, XML tags and attributes

Run:
    python examples/quickstart.py

Python 3.13+.
"""

from __future__ import annotations

from patternseeker import Cursor, MoveMode


def example_1_positioning() -> None:
    """Walk a log line with expect and seek_to."""
    print("=" * 60)
    print("Example 1: Positioning")
    print("=" * 60)

    line = Cursor("GET /index.html 200 1532")
    if line.expect("GET "):
        path = line.extract_until(" ", MoveMode.AFTER)
        status = line.take_unsigned_integer()
        size = line.take_unsigned_integer(default=0)
        print(f"path={path} status={status} size={size}")
    print(f"consumed {line.get_offset()} characters")
    print()


def example_2_records() -> None:
    """Split delimited records without copying the input."""
    print("=" * 60)
    print("Example 2: Delimited records")
    print("=" * 60)

    csv = Cursor("alice,30\nbob,25\ncarol,41\n")
    while csv.is_not_empty:
        name = csv.extract_until(",", MoveMode.AFTER)
        age = csv.take_signed_integer()
        csv.skip_whitespace()
        line, col = name.compute_line_col()
        print(f"{line}:{col} {name} is {age}")
    print()


def example_3_json() -> None:
    """Pull properties out of a JSON document."""
    print("=" * 60)
    print("Example 3: JSON properties")
    print("=" * 60)

    doc = Cursor('{"user": {"name": "John", "roles": ["admin", "dev"]}, "active": true}')
    user = doc.get_json_property("user")
    print(f"user   = {user}")
    print(f"name   = {user.get_json_property('name')}")
    print(f"roles  = {user.get_json_property('roles')}")
    print(f"active = {doc.get_json_property('active')}")

    missing = doc.get_json_property("email")
    print(f"email found? {missing.found}")
    print()


def example_4_xml() -> None:
    """Iterate XML elements and read attributes."""
    print("=" * 60)
    print("Example 4: XML tags and attributes")
    print("=" * 60)

    feed = Cursor(
        '<feed><entry id="1"><title>First</title></entry>'
        '<entry id="2"><title>Second</title></entry></feed>'
    )
    while (entry := feed.get_xml_tag("entry", MoveMode.AFTER)).found:
        print(f"entry {entry.get_xml_attr('id')}: {entry.get_xml_tag_body('title')}")
    print()


if __name__ == "__main__":
    example_1_positioning()
    example_2_records()
    example_3_json()
    example_4_xml()
