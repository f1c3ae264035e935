"""Binary search tree keyed by comparable keys, each carrying optional information."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    info: Any = None
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A binary search tree without duplicate keys; iteration yields keys in order."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def _find(self, key: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        """Return (parent, node) for ``key``; node is None when absent."""
        up, node = None, self._root
        while node is not None and node.key != key:
            up = node
            node = node.left if key < node.key else node.right
        return up, node

    def search(self, key: Any) -> Any:
        """Return the information stored with ``key``."""
        _, node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.info

    def insert(self, key: Any, info: Any = None) -> bool:
        """Insert ``key``; return False when it is already present."""
        up, node = self._find(key)
        if node is not None:
            return False
        fresh = _Node(key, info)
        if up is None:
            self._root = fresh
        elif key < up.key:
            up.left = fresh
        else:
            up.right = fresh
        self._size += 1
        return True

    def _relink(self, up: Optional[_Node], old: _Node, new: Optional[_Node]) -> None:
        if up is None:
            self._root = new
        elif up.left is old:
            up.left = new
        else:
            up.right = new

    def delete(self, key: Any) -> None:
        """Remove ``key``, replacing a two-child node by its inorder predecessor."""
        up, node = self._find(key)
        if node is None:
            raise KeyError(key)
        if node.right is None:
            self._relink(up, node, node.left)
        elif node.left is None:
            self._relink(up, node, node.right)
        else:
            q, s = node, node.left
            while s.right is not None:
                q, s = s, s.right
            node.key, node.info = s.key, s.info
            if q is not node:
                q.right = s.left
            else:
                q.left = s.left
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                yield node.key
                node = node.right

    def __contains__(self, key: Any) -> bool:
        return self._find(key)[1] is not None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"