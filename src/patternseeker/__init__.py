"""PatternSeeker - zero-copy text cursor for ad-hoc extraction.

Scans delimited records, bracketed objects and small JSON/XML-like fragments
without building a parse tree or copying the source text. Not a validating
parser: malformed input makes operations report "not found" rather than
raise.

Public API:
    Cursor - Window over a string with positioning, extraction and
        structured-text helpers
    MoveMode - Where an operation leaves the invoking cursor
    TextView - Borrowed (source, start, end) form of a cursor
    IntegerScan - Result of the pure integer scanners
    scan_unsigned / scan_signed - Integer scanners over a string window

Submodules:
    patternseeker.structured - JSON property and XML tag/attribute helpers
    patternseeker.constants - Character sets and integer limits
    patternseeker.cli - Command-line harness
"""

from .cursor import Cursor, TextView
from .enums import MoveMode
from .numbers import IntegerScan, scan_signed, scan_unsigned

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("patternseeker")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Cursor",
    "IntegerScan",
    "MoveMode",
    "TextView",
    "__version__",
    "scan_signed",
    "scan_unsigned",
]
