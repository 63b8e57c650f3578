"""Data models for Rust items, their members and their fields."""

from dataclasses import dataclass, field
from enum import Enum

from fully_pub.attribute import Attribute
from fully_pub.span import Span
from fully_pub.visibility import Visibility, VisibilitySite


class ItemKind(Enum):
    """Kinds of declaration the rewriter distinguishes."""

    CONST = "const"
    ENUM = "enum"
    EXTERN_CRATE = "extern_crate"
    FN = "fn"
    FOREIGN_MOD = "foreign_mod"
    IMPL = "impl"
    MACRO = "macro"
    MOD = "mod"
    STATIC = "static"
    STRUCT = "struct"
    TRAIT = "trait"
    TRAIT_ALIAS = "trait_alias"
    TYPE = "type"
    UNION = "union"
    USE = "use"
    OTHER = "other"


@dataclass
class Field:
    """A named or positional field of a struct or union."""

    name: str | None  # None for tuple struct fields
    vis: Visibility = Visibility.PRIVATE
    attrs: list[Attribute] = field(default_factory=list)
    span: Span | None = None
    vis_site: VisibilitySite | None = None
    # Attributes as parsed, used to find the ones removed since.
    source_attrs: tuple[Attribute, ...] = field(
        default=(), repr=False, compare=False
    )


@dataclass
class Item:
    """A declaration without a visibility slot (use, extern crate, macro, ...)."""

    kind: ItemKind
    name: str = ""
    attrs: list[Attribute] = field(default_factory=list)
    span: Span | None = None
    source_attrs: tuple[Attribute, ...] = field(
        default=(), repr=False, compare=False
    )


@dataclass
class VisibleItem(Item):
    """A declaration carrying its own visibility (fn, const, trait, ...)."""

    vis: Visibility = Visibility.PRIVATE
    vis_site: VisibilitySite | None = None


@dataclass
class ModItem(VisibleItem):
    """A module; `body` is None for `mod name;` declarations."""

    kind: ItemKind = ItemKind.MOD
    body: list[Item] | None = None


@dataclass
class FieldsItem(VisibleItem):
    """A struct or union; `fields` is None for unit structs."""

    kind: ItemKind = ItemKind.STRUCT
    fields: list[Field] | None = None


@dataclass
class ImplItem(Item):
    """An impl block; `trait_ref` is set for trait implementations."""

    kind: ItemKind = ItemKind.IMPL
    trait_ref: str | None = None
    members: list[Item] = field(default_factory=list)


@dataclass
class ForeignModItem(Item):
    """An `extern "ABI" { ... }` block."""

    kind: ItemKind = ItemKind.FOREIGN_MOD
    members: list[Item] = field(default_factory=list)
