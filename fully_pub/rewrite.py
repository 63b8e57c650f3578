"""Logic for making an item, and what it contains, public.

Each item kind has its own rule:

- `const`, `enum`, `fn`, `static`, `trait`, trait aliases and `type` are made
  public. Items nested in a `fn` body are not affected.
- `extern crate`, `use` and macros are left as-is.
- `extern` blocks have their `fn`, `static` and `type` items made public.
- Inherent `impl` blocks have their `const`, `fn` and `type` items made public.
  Trait impls are skipped entirely, markers included.
- A `mod { ... }` is made public; its content is only visited when
  `recursive` is set. A `mod name;` declaration is left as-is.
- `struct` and `union` are made public along with all their fields.

Any node carrying `#[fully_pub(exclude)]` keeps its visibility and, for
containers, its content.
"""

import logging
from collections.abc import Callable
from typing import Any

from fully_pub.attribute import DEFAULT_MARKER
from fully_pub.items import (
    FieldsItem,
    ForeignModItem,
    ImplItem,
    Item,
    ItemKind,
    ModItem,
    VisibleItem,
)
from fully_pub.make_pub import make_pub
from fully_pub.scan_and_strip import scan_and_strip

logger = logging.getLogger(__name__)

SIMPLE_KINDS = frozenset(
    {
        ItemKind.CONST,
        ItemKind.ENUM,
        ItemKind.FN,
        ItemKind.STATIC,
        ItemKind.TRAIT,
        ItemKind.TRAIT_ALIAS,
        ItemKind.TYPE,
    }
)
FOREIGN_MEMBER_KINDS = frozenset({ItemKind.FN, ItemKind.STATIC, ItemKind.TYPE})
IMPL_MEMBER_KINDS = frozenset({ItemKind.CONST, ItemKind.FN, ItemKind.TYPE})


def rewrite(item: Item, recursive: bool = False, marker: str = DEFAULT_MARKER) -> None:
    """Make `item` public in place, following the rule for its kind."""
    rule = _RULES.get(item.kind)
    if rule is None:
        # extern crate, use, macros and unrecognized kinds
        return
    rule(item, recursive, marker)


def _rewrite_simple(item: VisibleItem, recursive: bool, marker: str) -> None:
    if not scan_and_strip(item.attrs, marker):
        make_pub(item)


def _rewrite_members(
    members: list[Item], kinds: frozenset[ItemKind], marker: str
) -> None:
    """Make each member of one of `kinds` public unless it opts out."""
    for member in members:
        if member.kind not in kinds or not isinstance(member, VisibleItem):
            continue
        if not scan_and_strip(member.attrs, marker):
            make_pub(member)


def _rewrite_foreign_mod(item: ForeignModItem, recursive: bool, marker: str) -> None:
    if not scan_and_strip(item.attrs, marker):
        _rewrite_members(item.members, FOREIGN_MEMBER_KINDS, marker)


def _rewrite_impl(item: ImplItem, recursive: bool, marker: str) -> None:
    if item.trait_ref is not None:
        logger.debug("Skipping impl of trait %s", item.trait_ref)
        return
    if not scan_and_strip(item.attrs, marker):
        _rewrite_members(item.members, IMPL_MEMBER_KINDS, marker)


def _rewrite_mod(item: ModItem, recursive: bool, marker: str) -> None:
    if item.body is None:
        return
    if scan_and_strip(item.attrs, marker):
        return

    make_pub(item)
    if recursive:
        for child in item.body:
            rewrite(child, recursive, marker)


def _rewrite_fields(item: FieldsItem, recursive: bool, marker: str) -> None:
    if scan_and_strip(item.attrs, marker):
        return

    make_pub(item)
    for fld in item.fields or []:
        if not scan_and_strip(fld.attrs, marker):
            make_pub(fld)


_RULES: dict[ItemKind, Callable[[Any, bool, str], None]] = {
    **dict.fromkeys(SIMPLE_KINDS, _rewrite_simple),
    ItemKind.FOREIGN_MOD: _rewrite_foreign_mod,
    ItemKind.IMPL: _rewrite_impl,
    ItemKind.MOD: _rewrite_mod,
    ItemKind.STRUCT: _rewrite_fields,
    ItemKind.UNION: _rewrite_fields,
}
