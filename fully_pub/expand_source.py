"""Logic for expanding every `fully_pub` invocation found in a source file."""

import logging

from fully_pub.attribute import DEFAULT_MARKER, Attribute
from fully_pub.items import Item, ModItem
from fully_pub.make_fully_pub import make_fully_pub
from fully_pub.render import render
from fully_pub.rust_parser import RustParser

logger = logging.getLogger(__name__)


def expand_source(
    source: str, marker: str = DEFAULT_MARKER, parser: RustParser | None = None
) -> str:
    """Expand the `#[<marker>]` attributes of a Rust source file.

    Invocations are expanded outermost first, the way the compiler expands
    attribute macros: an item's first `#[<marker>(...)]` attribute is the
    invocation and its argument selects recursive mode. Inline module bodies are
    then searched for invocations of their own. Sources without any invocation
    are returned unchanged.
    """
    data = source.encode("utf-8")
    items = (parser or RustParser()).parse(data)
    count = expand_items(items, marker)
    if not count:
        return source
    logger.debug("Expanded %d invocation(s)", count)
    return render(items, data)


def expand_items(items: list[Item], marker: str = DEFAULT_MARKER) -> int:
    """Expand the invocations among `items` in place, returning how many ran."""
    count = 0
    for item in items:
        invocation = _take_invocation(item.attrs, marker)
        if invocation is not None:
            make_fully_pub(invocation.tokens, item, marker, invocation.span)
            count += 1
        if isinstance(item, ModItem) and item.body is not None:
            count += expand_items(item.body, marker)
    return count


def _take_invocation(attrs: list[Attribute], marker: str) -> Attribute | None:
    """Remove and return the first attribute named `marker`, if any."""
    for i, attr in enumerate(attrs):
        if attr.path == marker:
            return attrs.pop(i)
    return None
