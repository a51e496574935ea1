"""Tests for empty-category back-filling."""

from __future__ import annotations

from searchlens.categories import enhance
from searchlens.models.category import Category
from searchlens.models.content import ContentItem


def _items(n: int) -> list[ContentItem]:
    return [ContentItem(content=f"item {i}") for i in range(n)]


def test_enhance_fills_empty_category_with_head_of_items() -> None:
    """It should copy the first items into an empty category."""

    items = _items(3)
    out = enhance([Category(id="x", name="X")], items)
    assert out[0].content == items


def test_enhance_respects_limit() -> None:
    """It should copy at most five items by default and honor an explicit limit."""

    items = _items(7)
    assert enhance([Category(name="X")], items)[0].content == items[:5]
    assert enhance([Category(name="X")], items, limit=2)[0].content == items[:2]
    assert enhance([Category(name="X")], items, limit=0)[0].content == []


def test_enhance_leaves_populated_categories_alone() -> None:
    """It should not touch categories that already have content."""

    own = [ContentItem(content="own")]
    category = Category(name="X", content=own)
    assert enhance([category], _items(3))[0] is category


def test_enhance_gives_each_empty_category_the_same_items() -> None:
    """It should let several empty categories share the same placeholders."""

    items = _items(2)
    out = enhance([Category(name="A"), Category(name="B")], items)
    assert out[0].content == items
    assert out[1].content == items


def test_enhance_is_idempotent_and_does_not_mutate() -> None:
    """It should give the same result when applied twice and leave inputs unchanged."""

    categories = [Category(name="A"), Category(name="B", content=[ContentItem(content="b")])]
    items = _items(3)

    once = enhance(categories, items)
    twice = enhance(once, items)
    assert [c.model_dump() for c in once] == [c.model_dump() for c in twice]
    assert categories[0].content == []


def test_enhance_without_items_returns_copy() -> None:
    """It should return the categories unchanged when there are no items."""

    categories = [Category(name="A")]
    out = enhance(categories, [])
    assert out == categories
    assert out is not categories
