"""Tests for the visibility rewrite rules."""

import copy

import pytest

from fully_pub.attribute import Attribute
from fully_pub.errors import DuplicateMarkerError, UnknownMarkerArgumentError
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
from fully_pub.rewrite import rewrite
from fully_pub.visibility import Visibility

PRIVATE = Visibility.PRIVATE
PUBLIC = Visibility.PUBLIC
RESTRICTED = Visibility.RESTRICTED


def exclude() -> Attribute:
    """Build a `#[fully_pub(exclude)]` attribute."""
    return Attribute("fully_pub", "exclude")


def fn(name: str, *attrs: Attribute, vis: Visibility = PRIVATE) -> VisibleItem:
    """Build a function item."""
    return VisibleItem(ItemKind.FN, name=name, attrs=list(attrs), vis=vis)


@pytest.mark.parametrize(
    "kind",
    [
        ItemKind.CONST,
        ItemKind.ENUM,
        ItemKind.FN,
        ItemKind.STATIC,
        ItemKind.TRAIT,
        ItemKind.TRAIT_ALIAS,
        ItemKind.TYPE,
    ],
)
def test_simple_kinds_made_public(kind: ItemKind) -> None:
    """Verify items with only a visibility slot become public."""
    item = VisibleItem(kind, vis=RESTRICTED)
    rewrite(item)
    assert item.vis is PUBLIC


def test_simple_kind_excluded() -> None:
    """Verify an excluded item keeps its visibility and loses the marker."""
    inline = Attribute("inline")
    item = fn("f", inline, exclude(), vis=RESTRICTED)
    rewrite(item)
    assert item.vis is RESTRICTED
    assert item.attrs == [inline]


@pytest.mark.parametrize(
    "kind", [ItemKind.EXTERN_CRATE, ItemKind.USE, ItemKind.MACRO, ItemKind.OTHER]
)
def test_inert_kinds(kind: ItemKind) -> None:
    """Verify kinds without a visibility rule are untouched, markers included."""
    item = Item(kind, attrs=[exclude()])
    before = copy.deepcopy(item)
    rewrite(item, recursive=True)
    assert item == before


def test_struct_with_excluded_field() -> None:
    """Verify the struct and unmarked fields become public, marked ones do not."""
    item = FieldsItem(
        name="User",
        fields=[
            Field("name"),
            Field("secret", attrs=[exclude()]),
        ],
    )
    rewrite(item)
    assert item.vis is PUBLIC
    assert item.fields is not None
    assert item.fields[0].vis is PUBLIC
    assert item.fields[1].vis is PRIVATE
    assert item.fields[1].attrs == []


def test_tuple_struct_fields() -> None:
    """Verify positional fields are handled like named ones."""
    item = FieldsItem(fields=[Field(None), Field(None, vis=RESTRICTED)])
    rewrite(item)
    assert item.fields is not None
    assert [f.vis for f in item.fields] == [PUBLIC, PUBLIC]


def test_unit_struct() -> None:
    """Verify unit structs only get the struct-level change."""
    item = FieldsItem(name="Marker")
    rewrite(item)
    assert item.vis is PUBLIC
    assert item.fields is None


def test_excluded_struct_leaves_fields() -> None:
    """Verify an excluded struct leaves its fields and their markers alone."""
    item = FieldsItem(
        attrs=[exclude()],
        fields=[Field("a"), Field("b", attrs=[exclude()])],
    )
    rewrite(item)
    assert item.vis is PRIVATE
    assert item.attrs == []
    assert item.fields is not None
    assert item.fields[0].vis is PRIVATE
    assert item.fields[1].attrs == [exclude()]


def test_union_fields() -> None:
    """Verify unions follow the struct rule."""
    item = FieldsItem(
        kind=ItemKind.UNION, fields=[Field("i"), Field("f", attrs=[exclude()])]
    )
    rewrite(item)
    assert item.vis is PUBLIC
    assert item.fields is not None
    assert [f.vis for f in item.fields] == [PUBLIC, PRIVATE]


def test_duplicate_marker_on_field() -> None:
    """Verify a duplicated marker on a field aborts the rewrite."""
    item = FieldsItem(fields=[Field("a", attrs=[exclude(), exclude()])])
    with pytest.raises(DuplicateMarkerError):
        rewrite(item)


def test_inherent_impl() -> None:
    """Verify unmarked associated functions become public, marked ones do not."""
    item = ImplItem(
        members=[
            fn("new"),
            fn("happy_birthday"),
            fn("get_secret", exclude(), vis=RESTRICTED),
        ]
    )
    rewrite(item)
    visibilities = [getattr(m, "vis", None) for m in item.members]
    assert visibilities == [PUBLIC, PUBLIC, RESTRICTED]
    assert item.members[2].attrs == []


def test_impl_member_kinds() -> None:
    """Verify only const, fn and type members are affected."""
    item = ImplItem(
        members=[
            VisibleItem(ItemKind.CONST),
            VisibleItem(ItemKind.TYPE),
            Item(ItemKind.MACRO, attrs=[exclude()]),
        ]
    )
    rewrite(item)
    assert item.members[0].vis is PUBLIC  # type: ignore[attr-defined]
    assert item.members[1].vis is PUBLIC  # type: ignore[attr-defined]
    assert item.members[2].attrs == [exclude()]


def test_excluded_impl() -> None:
    """Verify an excluded impl block leaves its members alone."""
    item = ImplItem(attrs=[exclude()], members=[fn("f")])
    rewrite(item)
    assert item.attrs == []
    assert item.members[0].vis is PRIVATE  # type: ignore[attr-defined]


def test_trait_impl_untouched() -> None:
    """Verify trait impls are skipped entirely, markers included."""
    item = ImplItem(
        trait_ref="Display",
        attrs=[exclude()],
        members=[fn("fmt"), fn("other", exclude(), exclude())],
    )
    before = copy.deepcopy(item)
    rewrite(item, recursive=True)
    assert item == before


def test_foreign_mod() -> None:
    """Verify fn, static and type items of an extern block become public."""
    item = ForeignModItem(
        members=[
            fn("abs"),
            VisibleItem(ItemKind.STATIC, attrs=[exclude()]),
            VisibleItem(ItemKind.TYPE),
            Item(ItemKind.MACRO),
        ]
    )
    rewrite(item)
    visibilities = [getattr(m, "vis", None) for m in item.members]
    assert visibilities == [PUBLIC, PRIVATE, PUBLIC, None]


def test_excluded_foreign_mod() -> None:
    """Verify an excluded extern block leaves its items alone."""
    item = ForeignModItem(attrs=[exclude()], members=[fn("abs")])
    rewrite(item)
    assert item.members[0].vis is PRIVATE  # type: ignore[attr-defined]


def nested_module() -> ModItem:
    """Build a module holding items and a nested module."""
    deep = ModItem(
        name="deep",
        body=[
            Item(ItemKind.USE),
            fn("double_square"),
            fn("square_double", exclude()),
        ],
    )
    return ModItem(
        name="nested",
        body=[
            fn("double", Attribute("inline")),
            fn("square"),
            deep,
            ImplItem(trait_ref="Clone", members=[fn("clone", exclude())]),
        ],
    )


def test_mod_non_recursive() -> None:
    """Verify only the module itself is made public by default."""
    item = nested_module()
    before = copy.deepcopy(item.body)
    rewrite(item, recursive=False)
    assert item.vis is PUBLIC
    assert item.body == before


def test_mod_recursive() -> None:
    """Verify every nested item becomes public unless marked."""
    item = nested_module()
    rewrite(item, recursive=True)
    assert item.body is not None
    double, square, deep, trait_impl = item.body
    assert item.vis is PUBLIC
    assert double.vis is PUBLIC  # type: ignore[attr-defined]
    assert double.attrs == [Attribute("inline")]
    assert square.vis is PUBLIC  # type: ignore[attr-defined]
    assert isinstance(deep, ModItem)
    assert deep.vis is PUBLIC
    assert deep.body is not None
    assert deep.body[1].vis is PUBLIC  # type: ignore[attr-defined]
    assert deep.body[2].vis is PRIVATE  # type: ignore[attr-defined]
    assert deep.body[2].attrs == []
    assert isinstance(trait_impl, ImplItem)
    assert trait_impl.members[0].attrs == [exclude()]


def test_mod_recursive_excluded_child() -> None:
    """Verify an excluded nested module keeps its content untouched."""
    inner = ModItem(name="inner", attrs=[exclude()], body=[fn("f")])
    item = ModItem(body=[inner])
    rewrite(item, recursive=True)
    assert inner.vis is PRIVATE
    assert inner.body is not None
    assert inner.body[0].vis is PRIVATE  # type: ignore[attr-defined]


def test_mod_recursive_error_deep() -> None:
    """Verify an error at any depth aborts the whole rewrite."""
    inner = ModItem(body=[fn("f", Attribute("fully_pub", "keep"))])
    item = ModItem(body=[fn("a"), inner])
    with pytest.raises(UnknownMarkerArgumentError):
        rewrite(item, recursive=True)


def test_mod_without_body() -> None:
    """Verify `mod name;` declarations are a full no-op."""
    item = ModItem(name="other", attrs=[exclude()])
    rewrite(item, recursive=True)
    assert item.vis is PRIVATE
    assert item.attrs == [exclude()]


def test_idempotent() -> None:
    """Verify a second pass leaves the visibility state unchanged."""
    item = nested_module()
    rewrite(item, recursive=True)
    once = copy.deepcopy(item)
    rewrite(item, recursive=True)
    assert item == once
