"""Tests for ptree.builder: TreeBuilder state machine and sealed StringItem trees."""

import pytest

from ptree import StringItem, StructureError, TreeBuilder


class TestBuild:
    def test_empty(self):
        tree = TreeBuilder("test").build()
        assert tree.text == "test"
        assert tree.children() == ()

    def test_single_child(self):
        tree = TreeBuilder("test").add_empty_child("test_two").build()
        assert tree.label() == "test"
        assert len(tree.children()) == 1
        assert tree.children()[0].text == "test_two"

    def test_many_children_flat_keep_order(self):
        builder = TreeBuilder("test")
        for i in range(10):
            builder.add_empty_child(f"test {i}")
        tree = builder.build()
        assert [c.text for c in tree.children()] == [f"test {i}" for i in range(10)]

    def test_many_children_nested(self):
        builder = TreeBuilder("test")
        for i in range(10):
            builder.begin_child(f"test {i}")
        assert builder.depth == 10
        for _ in range(10):
            builder.end_child()
        item = builder.build()
        for i in range(10):
            assert len(item.children()) == 1
            item = item.children()[0]
            assert item.text == f"test {i}"
        assert item.children() == ()

    def test_sealed_tree_is_immutable(self):
        tree = TreeBuilder("root").add_empty_child("a").build()
        assert isinstance(tree.children(), tuple)
        with pytest.raises(AttributeError):
            tree.text = "changed"  # type: ignore[misc]

    def test_equal_structure_compares_equal(self):
        a = TreeBuilder("r").add_empty_child("x").build()
        assert a == StringItem("r", (StringItem("x"),))


class TestStructureErrors:
    def test_end_child_without_open_child(self):
        with pytest.raises(StructureError, match="no open child"):
            TreeBuilder("root").end_child()

    def test_end_child_too_many_times(self):
        builder = TreeBuilder("root").begin_child("a").end_child()
        with pytest.raises(StructureError):
            builder.end_child()

    def test_build_with_open_children(self):
        builder = TreeBuilder("root").begin_child("a").begin_child("b")
        with pytest.raises(StructureError, match="2 open"):
            builder.build()

    def test_failed_build_leaves_builder_usable(self):
        builder = TreeBuilder("root").begin_child("a")
        with pytest.raises(StructureError):
            builder.build()
        tree = builder.end_child().build()
        assert tree.children()[0].text == "a"

    def test_builder_consumed_by_build(self):
        builder = TreeBuilder("root")
        builder.build()
        with pytest.raises(StructureError):
            builder.build()
        with pytest.raises(StructureError):
            builder.add_empty_child("late")

    def test_structure_error_is_value_error(self):
        with pytest.raises(ValueError):
            TreeBuilder("root").end_child()
