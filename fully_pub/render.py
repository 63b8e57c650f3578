"""Logic for writing a rewritten item tree back into its source text.

Rendering applies the smallest possible edits to the original text: a `pub `
inserted or a restricted modifier replaced for each node made public, and each
removed attribute deleted along with the whitespace that follows it. All other
bytes are left untouched.
"""

from fully_pub.attribute import Attribute
from fully_pub.items import (
    Field,
    FieldsItem,
    ForeignModItem,
    ImplItem,
    Item,
    ModItem,
    VisibleItem,
)
from fully_pub.visibility import Visibility, VisibilitySite

Edit = tuple[int, int, bytes]

WHITESPACE = b" \t\r\n"


def render(items: list[Item], source: bytes) -> str:
    """Render the parsed items of `source` back to text."""
    edits: list[Edit] = []
    for item in items:
        _collect_item_edits(item, source, edits)

    out = source
    for start, end, text in sorted(edits, reverse=True):
        out = out[:start] + text + out[end:]
    return out.decode("utf-8")


def _collect_item_edits(item: Item, source: bytes, edits: list[Edit]) -> None:
    _collect_attribute_edits(item.source_attrs, item.attrs, source, edits)
    if isinstance(item, VisibleItem):
        _collect_visibility_edit(item.vis, item.vis_site, edits)

    children: list[Item] = []
    if isinstance(item, ModItem):
        children = item.body or []
    elif isinstance(item, (ImplItem, ForeignModItem)):
        children = item.members
    elif isinstance(item, FieldsItem):
        for fld in item.fields or []:
            _collect_field_edits(fld, source, edits)

    for child in children:
        _collect_item_edits(child, source, edits)


def _collect_field_edits(fld: Field, source: bytes, edits: list[Edit]) -> None:
    _collect_attribute_edits(fld.source_attrs, fld.attrs, source, edits)
    _collect_visibility_edit(fld.vis, fld.vis_site, edits)


def _collect_attribute_edits(
    source_attrs: tuple[Attribute, ...],
    attrs: list[Attribute],
    source: bytes,
    edits: list[Edit],
) -> None:
    """Delete every parsed attribute that is no longer attached to its node."""
    for attr in source_attrs:
        if attr.span is None or any(attr is kept for kept in attrs):
            continue
        end = attr.span.end
        while end < len(source) and source[end] in WHITESPACE:
            end += 1
        edits.append((attr.span.start, end, b""))


def _collect_visibility_edit(
    vis: Visibility, site: VisibilitySite | None, edits: list[Edit]
) -> None:
    if site is None or vis is not Visibility.PUBLIC or site.original is vis:
        return
    if site.span is not None:
        edits.append((site.span.start, site.span.end, b"pub"))
    else:
        edits.append((site.offset, site.offset, b"pub "))
