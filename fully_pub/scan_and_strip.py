"""Logic for finding and stripping the opt-out marker of a node."""

import re

from fully_pub.attribute import DEFAULT_MARKER, Attribute
from fully_pub.errors import (
    DuplicateMarkerError,
    MalformedMarkerError,
    UnknownMarkerArgumentError,
)

EXCLUDE_KEYWORD = "exclude"
IDENT_RE = re.compile(r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*")


def marker_argument(attr: Attribute, marker: str = DEFAULT_MARKER) -> str:
    """Return the single identifier passed to a marker attribute."""
    if attr.tokens is None:
        msg = f"expected attribute arguments in parentheses: #[{marker}(...)]"
        raise MalformedMarkerError(msg, attr.span)
    arg = attr.tokens.strip()
    if not IDENT_RE.fullmatch(arg):
        raise MalformedMarkerError(f"expected identifier, found `{arg}`", attr.span)
    return arg


def scan_and_strip(attrs: list[Attribute], marker: str = DEFAULT_MARKER) -> bool:
    """Return True if `attrs` holds `#[<marker>(exclude)]`, removing it.

    Every other attribute stays in place, in its original order. Raises if the
    marker has another argument or appears more than once.
    """
    excluded = False
    original = list(attrs)
    attrs.clear()

    for attr in original:
        if attr.path != marker:
            attrs.append(attr)
            continue

        arg = marker_argument(attr, marker)
        if arg != EXCLUDE_KEYWORD:
            raise UnknownMarkerArgumentError(arg, marker, attr.span)
        if excluded:
            raise DuplicateMarkerError(marker, attr.span)
        excluded = True

    return excluded
