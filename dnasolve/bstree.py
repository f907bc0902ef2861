"""Unbalanced binary search tree used as an ordered set."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


def _identity(value: Any) -> Any:
    return value


class BinarySearchTree:
    """An ordered set of values held in a plain binary search tree.

    Values are ordered by ``key(value)``; values with equal keys count as the
    same element, so adding one twice keeps only the first.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key or _identity
        self._root: _Node | None = None
        self._size = 0

    def _compare(self, a: Any, b: Any) -> int:
        ka, kb = self._key(a), self._key(b)
        return (ka > kb) - (ka < kb)

    def _find_node(self, value: Any) -> _Node | None:
        node = self._root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def add(self, value: Any) -> None:
        """Insert ``value`` unless an equal element is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return
            if cmp < 0:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
        self._size += 1

    def find(self, value: Any) -> Any | None:
        """Return the stored element equal to ``value``, or None."""
        node = self._find_node(value)
        return None if node is None else node.value

    def _remove(self, node: _Node | None, value: Any) -> _Node | None:
        if node is None:
            raise KeyError(value)
        cmp = self._compare(value, node.value)
        if cmp > 0:
            node.right = self._remove(node.right, value)
        elif cmp < 0:
            node.left = self._remove(node.left, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        return node

    def remove(self, value: Any) -> None:
        """Remove the element equal to ``value``; KeyError if absent."""
        self._root = self._remove(self._root, value)
        self._size -= 1

    def minimum(self) -> Any:
        """Return the smallest element; ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def __contains__(self, value: Any) -> bool:
        return self._find_node(value) is not None

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"