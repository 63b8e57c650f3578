"""Entry point for a single `fully_pub` invocation on an item."""

from fully_pub.attribute import DEFAULT_MARKER
from fully_pub.items import Item
from fully_pub.parse_recursive_flag import parse_recursive_flag
from fully_pub.rewrite import rewrite
from fully_pub.span import Span


def make_fully_pub(
    argument: str | None,
    item: Item,
    marker: str = DEFAULT_MARKER,
    span: Span | None = None,
) -> Item:
    """Parse the invocation argument, then make `item` public in place.

    The argument is validated before anything is touched, so a rejected
    argument leaves the item unchanged.
    """
    recursive = parse_recursive_flag(argument, marker, span)
    rewrite(item, recursive, marker)
    return item
