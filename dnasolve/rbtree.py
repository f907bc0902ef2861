"""Red-black tree used as an ordered multiset."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


def _identity(value: Any) -> Any:
    return value


class _Node:
    __slots__ = ("value", "red", "left", "right", "parent")

    def __init__(self, value: Any, nil: _Node | None, red: bool = True) -> None:
        self.value = value
        self.red = red
        self.left = nil
        self.right = nil
        self.parent = nil


class RedBlackTree:
    """An ordered collection of values kept balanced as a red-black tree.

    Values are ordered by ``key(value)``. Values with equal keys may be added
    more than once; each copy is kept, placed after the ones already there.
    """

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self._key = key or _identity
        nil = _Node(None, None, red=False)
        nil.left = nil.right = nil.parent = nil
        self._nil = nil
        self._root = nil
        self._size = 0

    # -- rotations ---------------------------------------------------------

    def _rotate_left(self, x: _Node) -> None:
        nil = self._nil
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        nil = self._nil
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    # -- insertion ---------------------------------------------------------

    def add(self, value: Any) -> None:
        """Insert ``value``; equal values are kept side by side."""
        nil = self._nil
        z = _Node(value, nil)
        key = self._key(value)
        parent = nil
        node = self._root
        while node is not nil:
            parent = node
            node = node.left if key < self._key(node.value) else node.right
        z.parent = parent
        if parent is nil:
            self._root = z
        elif key < self._key(parent.value):
            parent.left = z
        else:
            parent.right = z
        self._size += 1
        self._insert_fixup(z)

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.red:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grand.red = True
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_left(z.parent.parent)
        self._root.red = False

    # -- lookup ------------------------------------------------------------

    def _find_node(self, value: Any) -> _Node:
        key = self._key(value)
        node = self._root
        while node is not self._nil:
            current = self._key(node.value)
            if key < current:
                node = node.left
            elif current < key:
                node = node.right
            else:
                return node
        return self._nil

    def find(self, value: Any) -> Any | None:
        """Return a stored element equal to ``value``, or None."""
        node = self._find_node(value)
        return None if node is self._nil else node.value

    def __contains__(self, value: Any) -> bool:
        return self._find_node(value) is not self._nil

    # -- removal -----------------------------------------------------------

    def _transplant(self, u: _Node, v: _Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _maximum(self, node: _Node) -> _Node:
        while node.right is not self._nil:
            node = node.right
        return node

    def remove(self, value: Any) -> None:
        """Remove one element equal to ``value``; KeyError if there is none."""
        z = self._find_node(value)
        if z is self._nil:
            raise KeyError(value)
        nil = self._nil
        y = z
        y_was_red = y.red
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            y_was_red = y.red
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.red = z.red
        self._size -= 1
        if not y_was_red:
            self._delete_fixup(x)

    def _delete_fixup(self, x: _Node) -> None:
        while x is not self._root and not x.red:
            parent = x.parent
            if x is parent.left:
                w = parent.right
                if w.red:
                    w.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    w = x.parent.right
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.right.red:
                        w.left.red = False
                        w.red = True
                        self._rotate_right(w)
                        w = x.parent.right
                    w.red = x.parent.red
                    x.parent.red = False
                    w.right.red = False
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = parent.left
                if w.red:
                    w.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    w = x.parent.left
                if not w.right.red and not w.left.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.left.red:
                        w.right.red = False
                        w.red = True
                        self._rotate_left(w)
                        w = x.parent.left
                    w.red = x.parent.red
                    x.parent.red = False
                    w.left.red = False
                    self._rotate_right(x.parent)
                    x = self._root
        x.red = False

    # -- traversal ---------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        nil = self._nil
        if self._root is nil:
            return
        node = self._minimum(self._root)
        while node is not nil:
            yield node.value
            if node.right is not nil:
                node = self._minimum(node.right)
            else:
                parent = node.parent
                while parent is not nil and node is parent.right:
                    node, parent = parent, parent.parent
                node = parent

    def __reversed__(self) -> Iterator[Any]:
        nil = self._nil
        if self._root is nil:
            return
        node = self._maximum(self._root)
        while node is not nil:
            yield node.value
            if node.left is not nil:
                node = self._maximum(node.left)
            else:
                parent = node.parent
                while parent is not nil and node is parent.left:
                    node, parent = parent, parent.parent
                node = parent

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # -- self checks -------------------------------------------------------

    def _height(self) -> int:
        def depth(node: _Node) -> int:
            if node is self._nil:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self._root)

    def _validate(self) -> int:
        """Check the red-black rules and ordering; return the black height."""
        nil = self._nil
        if self._root.red:
            raise ValueError("root is red")

        def walk(node: _Node) -> int:
            if node is nil:
                return 1
            if node.red and (node.left.red or node.right.red):
                raise ValueError("red node with a red child")
            key = self._key(node.value)
            if node.left is not nil and key < self._key(node.left.value):
                raise ValueError("left child orders after its parent")
            if node.right is not nil and self._key(node.right.value) < key:
                raise ValueError("right child orders before its parent")
            for child in (node.left, node.right):
                if child is not nil and child.parent is not node:
                    raise ValueError("broken parent link")
            left = walk(node.left)
            right = walk(node.right)
            if left != right:
                raise ValueError("unequal black heights")
            return left + (0 if node.red else 1)

        return walk(self._root)