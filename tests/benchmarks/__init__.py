"""Performance benchmarks for PatternSeeker.

Benchmarks use pytest-benchmark to track the cost of scanning large inputs.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
