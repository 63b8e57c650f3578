"""Data model for attributes attached to items and fields."""

from dataclasses import dataclass

from fully_pub.span import Span

DEFAULT_MARKER = "fully_pub"


@dataclass
class Attribute:
    """Represents an outer attribute such as `#[derive(Debug)]`."""

    path: str  # whitespace-free, e.g. "fully_pub" or "serde::rename"
    tokens: str | None = None  # text between the argument delimiters
    span: Span | None = None
