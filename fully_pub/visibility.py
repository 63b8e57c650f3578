"""Data models for visibility modifiers."""

from dataclasses import dataclass
from enum import Enum

from fully_pub.span import Span


class Visibility(Enum):
    """Accessibility of a declaration."""

    PRIVATE = "private"  # no modifier, inherited
    RESTRICTED = "restricted"  # pub(crate), pub(super), pub(in path), crate
    PUBLIC = "public"


@dataclass(frozen=True)
class VisibilitySite:
    """Where a node's visibility modifier sits in the source text.

    `span` covers an existing modifier; without one, `offset` is where a new
    modifier is inserted.
    """

    offset: int
    original: Visibility = Visibility.PRIVATE
    span: Span | None = None
