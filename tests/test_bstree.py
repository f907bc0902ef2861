import pytest

from dnasolve.bstree import BinarySearchTree

INTS = [50, 30, 20, 40, 70, 60, 80]
FRUITS = ["apple", "banana", "cherry", "date", "fig", "grape"]


def build(values, key=None):
    tree = BinarySearchTree(key)
    for v in values:
        tree.add(v)
    return tree


def test_integer_membership():
    tree = build(INTS)
    assert 60 in tree
    assert 65 not in tree
    assert len(tree) == 7


def test_in_order_iteration_sorted():
    assert list(build(INTS)) == sorted(INTS)


def test_strings_contains_and_remove():
    tree = build(FRUITS)
    assert "cherry" in tree
    tree.remove("banana")
    assert "banana" not in tree
    assert list(tree) == [f for f in FRUITS if f != "banana"]
    assert len(tree) == 5


def test_duplicates_ignored():
    tree = build(["b", "a", "b", "c", "a"])
    assert list(tree) == ["a", "b", "c"]
    assert len(tree) == 3


def test_remove_node_with_two_children():
    tree = build(INTS)
    tree.remove(50)
    assert 50 not in tree
    assert list(tree) == [20, 30, 40, 60, 70, 80]


def test_remove_leaf_and_single_child():
    tree = build(INTS)
    tree.remove(20)
    tree.remove(30)
    assert list(tree) == [40, 50, 60, 70, 80]


def test_remove_everything():
    tree = build(INTS)
    for v in INTS:
        tree.remove(v)
    assert list(tree) == []
    assert len(tree) == 0


def test_remove_missing_raises():
    tree = build(INTS)
    with pytest.raises(KeyError):
        tree.remove(99)
    assert len(tree) == 7


def test_minimum():
    tree = build(INTS)
    assert tree.minimum() == 20
    tree.remove(20)
    assert tree.minimum() == 30


def test_minimum_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_find_returns_stored_element():
    tree = build(["Apple", "banana"], key=str.lower)
    assert tree.find("APPLE") == "Apple"
    assert tree.find("cherry") is None


def test_key_function_orders():
    tree = build(FRUITS, key=lambda s: s[::-1])
    assert list(tree) == sorted(FRUITS, key=lambda s: s[::-1])