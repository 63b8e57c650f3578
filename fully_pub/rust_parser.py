"""Logic for building the item tree of a Rust source file with tree-sitter."""

import logging

import tree_sitter_rust
from tree_sitter import Language, Node, Parser

from fully_pub.attribute import Attribute
from fully_pub.errors import RustParseError
from fully_pub.items import (
    Field,
    FieldsItem,
    ForeignModItem,
    ImplItem,
    Item,
    ItemKind,
    ModItem,
    VisibleItem,
)
from fully_pub.span import Span
from fully_pub.visibility import Visibility, VisibilitySite

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tree_sitter_rust.language())

NODE_KINDS: dict[str, ItemKind] = {
    "associated_type": ItemKind.TYPE,  # `type Foo;` in extern blocks
    "const_item": ItemKind.CONST,
    "enum_item": ItemKind.ENUM,
    "extern_crate_declaration": ItemKind.EXTERN_CRATE,
    "foreign_mod_item": ItemKind.FOREIGN_MOD,
    "function_item": ItemKind.FN,
    "function_signature_item": ItemKind.FN,
    "impl_item": ItemKind.IMPL,
    "macro_definition": ItemKind.MACRO,
    "macro_invocation": ItemKind.MACRO,
    "mod_item": ItemKind.MOD,
    "static_item": ItemKind.STATIC,
    "struct_item": ItemKind.STRUCT,
    "trait_item": ItemKind.TRAIT,
    "type_item": ItemKind.TYPE,
    "union_item": ItemKind.UNION,
    "use_declaration": ItemKind.USE,
}
VISIBLE_KINDS = frozenset(
    {
        ItemKind.CONST,
        ItemKind.ENUM,
        ItemKind.FN,
        ItemKind.STATIC,
        ItemKind.TRAIT,
        ItemKind.TYPE,
    }
)
SKIPPED_NODES = frozenset(
    {"line_comment", "block_comment", "inner_attribute_item", "empty_statement"}
)


class RustParser:
    """Builds Item trees from Rust source text."""

    def __init__(self) -> None:
        """Initialize the underlying tree-sitter parser."""
        self.parser = Parser(RUST_LANGUAGE)
        self.source = b""

    def parse(self, source: bytes) -> list[Item]:
        """Parse a whole source file into its top-level items."""
        self.source = source
        tree = self.parser.parse(source)
        root = tree.root_node
        if root.has_error:
            span = self._error_span(root)
            msg = f"expected a valid Rust item near line {span.line}"
            raise RustParseError(msg, span)
        items = self._parse_declarations(root.children)
        logger.debug("Parsed %d top-level items", len(items))
        return items

    def _parse_declarations(self, children: list[Node]) -> list[Item]:
        """Parse a sequence of sibling declarations, attaching outer attributes."""
        items: list[Item] = []
        pending: list[Attribute] = []
        for child in children:
            if not child.is_named or child.type in SKIPPED_NODES:
                continue
            if child.type == "attribute_item":
                pending.append(self._parse_attribute(child))
                continue
            items.append(self._parse_item(child, pending))
            pending = []
        return items

    def _parse_item(self, node: Node, attrs: list[Attribute]) -> Item:
        kind = NODE_KINDS.get(node.type, ItemKind.OTHER)
        name_node = node.child_by_field_name("name")
        common = {
            "name": self._text(name_node) if name_node is not None else "",
            "attrs": attrs,
            "span": self._span(node),
            "source_attrs": tuple(attrs),
        }
        body = node.child_by_field_name("body")

        if kind is ItemKind.MOD:
            site = self._item_visibility(node)
            return ModItem(
                vis=site.original,
                vis_site=site,
                body=self._parse_declarations(body.children) if body else None,
                **common,
            )
        if kind in (ItemKind.STRUCT, ItemKind.UNION):
            site = self._item_visibility(node)
            return FieldsItem(
                kind=kind,
                vis=site.original,
                vis_site=site,
                fields=self._parse_fields(body),
                **common,
            )
        if kind is ItemKind.IMPL:
            trait = node.child_by_field_name("trait")
            return ImplItem(
                trait_ref=self._text(trait) if trait is not None else None,
                members=self._parse_declarations(body.children) if body else [],
                **common,
            )
        if kind is ItemKind.FOREIGN_MOD:
            return ForeignModItem(
                members=self._parse_declarations(body.children) if body else [],
                **common,
            )
        if kind in VISIBLE_KINDS:
            site = self._item_visibility(node)
            return VisibleItem(kind=kind, vis=site.original, vis_site=site, **common)
        return Item(kind=kind, **common)

    def _parse_attribute(self, node: Node) -> Attribute:
        """Parse an `attribute_item` node (`#[path(tokens)]`)."""
        attr = self._first_child(node, "attribute")
        if attr is None or not attr.named_children:
            return Attribute(path="", span=self._span(node))
        path = "".join(self._text(attr.named_children[0]).split())
        args = attr.child_by_field_name("arguments")
        tokens = self._text(args)[1:-1] if args is not None else None
        return Attribute(path=path, tokens=tokens, span=self._span(node))

    def _parse_fields(self, body: Node | None) -> list[Field] | None:
        if body is None:
            return None
        if body.type == "field_declaration_list":
            return self._parse_named_fields(body)
        return self._parse_positional_fields(body)

    def _parse_named_fields(self, body: Node) -> list[Field]:
        fields: list[Field] = []
        pending: list[Attribute] = []
        for child in body.named_children:
            if child.type == "attribute_item":
                pending.append(self._parse_attribute(child))
            elif child.type == "field_declaration":
                site = self._item_visibility(child)
                name_node = child.child_by_field_name("name")
                fields.append(
                    Field(
                        name=self._text(name_node) if name_node is not None else None,
                        vis=site.original,
                        attrs=pending,
                        span=self._span(child),
                        vis_site=site,
                        source_attrs=tuple(pending),
                    )
                )
                pending = []
        return fields

    def _parse_positional_fields(self, body: Node) -> list[Field]:
        """Parse a tuple struct body, where fields have no node of their own.

        Each field is a run of attributes, an optional visibility and a type,
        ended by a comma or the closing parenthesis.
        """
        fields: list[Field] = []
        pending: list[Attribute] = []
        vis_node: Node | None = None
        for child in body.children:
            if child.type == "attribute_item":
                pending.append(self._parse_attribute(child))
            elif child.type == "visibility_modifier":
                vis_node = child
            elif child.is_named and child.type not in SKIPPED_NODES:
                site = self._visibility_site(vis_node, child.start_byte)
                start = vis_node if vis_node is not None else child
                fields.append(
                    Field(
                        name=None,
                        vis=site.original,
                        attrs=pending,
                        span=Span(
                            start.start_byte,
                            child.end_byte,
                            start.start_point[0] + 1,
                            start.start_point[1] + 1,
                        ),
                        vis_site=site,
                        source_attrs=tuple(pending),
                    )
                )
                pending = []
                vis_node = None
        return fields

    def _item_visibility(self, node: Node) -> VisibilitySite:
        return self._visibility_site(
            self._first_child(node, "visibility_modifier"), node.start_byte
        )

    def _visibility_site(self, vis: Node | None, offset: int) -> VisibilitySite:
        """Describe an existing modifier, or where a new one would go."""
        if vis is None:
            return VisibilitySite(offset=offset)
        text = "".join(self._text(vis).split())
        original = Visibility.PUBLIC if text == "pub" else Visibility.RESTRICTED
        return VisibilitySite(
            offset=vis.start_byte, original=original, span=self._span(vis)
        )

    def _error_span(self, node: Node) -> Span:
        """Locate the first syntax error below `node`."""
        for child in node.children:
            if child.type == "ERROR" or child.is_missing:
                return self._span(child)
            if child.has_error:
                return self._error_span(child)
        return self._span(node)

    def _first_child(self, node: Node, node_type: str) -> Node | None:
        for child in node.children:
            if child.type == node_type:
                return child
        return None

    def _text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def _span(self, node: Node) -> Span:
        return Span(
            node.start_byte,
            node.end_byte,
            node.start_point[0] + 1,
            node.start_point[1] + 1,
        )
