"""Data model for source locations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """A byte range in a source file, with the 1-based position of its start."""

    start: int
    end: int
    line: int = 1
    column: int = 1
