"""Tests for shape_core.tree."""

import pytest

from shape_core.leaves import TextLeaf
from shape_core.tree import Leaf, LeafValue, TreeList, TreeMap, Unset, _UnsetType


class TestUnset:
    def test_singleton(self):
        assert Unset is _UnsetType()

    def test_falsy(self):
        assert not Unset

    def test_repr(self):
        assert repr(Unset) == "Unset"


class TestTreeList:
    def test_items_stored_as_tuple(self):
        lst = TreeList([Leaf(TextLeaf("a")), Leaf(TextLeaf("b"))])
        assert isinstance(lst.items, tuple)
        assert len(lst) == 2

    def test_accepts_generator(self):
        lst = TreeList(Leaf(TextLeaf(s)) for s in "xyz")
        assert [item.value.value for item in lst.items] == ["x", "y", "z"]

    def test_empty(self):
        assert len(TreeList()) == 0


class TestTreeMap:
    def test_read_only(self):
        m = TreeMap({"a": Leaf(TextLeaf("1"))})
        with pytest.raises(TypeError):
            m.entries["b"] = Leaf(TextLeaf("2"))

    def test_copies_source_mapping(self):
        source = {"a": Leaf(TextLeaf("1"))}
        m = TreeMap(source)
        source["b"] = Leaf(TextLeaf("2"))
        assert list(m.entries) == ["a"]

    def test_sorted_items(self):
        m = TreeMap({"b": Leaf(TextLeaf("2")), "B": Leaf(TextLeaf("3")), "a": Leaf(TextLeaf("1"))})
        assert [k for k, _ in m.sorted_items()] == ["B", "a", "b"]

    def test_equality_ignores_insertion_order(self):
        one = TreeMap({"x": Leaf(TextLeaf("1")), "y": Leaf(TextLeaf("2"))})
        two = TreeMap({"y": Leaf(TextLeaf("2")), "x": Leaf(TextLeaf("1"))})
        assert one == two


class TestLeaf:
    def test_frozen(self):
        leaf = Leaf(TextLeaf("a"))
        with pytest.raises(AttributeError):
            leaf.value = TextLeaf("b")

    def test_text_leaf_satisfies_protocol(self):
        assert isinstance(TextLeaf("a"), LeafValue)

    def test_plain_string_is_not_a_leaf_value(self):
        assert not isinstance("a", LeafValue)
