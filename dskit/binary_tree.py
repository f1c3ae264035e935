"""Linked binary trees: construction from a preorder description, traversals and editing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from dskit.link_queue import LinkQueue
from dskit.seq_stack import SeqStack

NULL_MARK = "#"


class Side(IntEnum):
    """Which child of a node an operation applies to."""

    LEFT = 0
    RIGHT = 1


@dataclass(eq=False)
class Node:
    """A tree node; nodes compare by identity."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def parse_preorder(text: str) -> Optional[Node]:
    """Build a tree from its preorder listing, with '#' for every empty subtree.

    For example ``"AB#C##D##"``. Trailing whitespace is ignored.
    """
    chars = iter(text)

    def build() -> Optional[Node]:
        try:
            ch = next(chars)
        except StopIteration:
            raise ValueError("incomplete preorder description") from None
        if ch == NULL_MARK:
            return None
        node = Node(ch)
        node.left = build()
        node.right = build()
        return node

    root = build()
    rest = "".join(chars)
    if rest.strip():
        raise ValueError(f"unexpected characters after the tree: {rest!r}")
    return root


def depth(root: Optional[Node]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(depth(root.left), depth(root.right))


def count_leaves(root: Optional[Node]) -> int:
    """Number of nodes without children."""
    return sum(1 for node in _nodes(root) if node.left is None and node.right is None)


def _nodes(root: Optional[Node]) -> Iterator[Node]:
    """Yield every node in preorder."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node is not None:
            yield node
            stack.append(node.right)
            stack.append(node.left)


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Recursive preorder traversal."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def preorder_iterative(root: Optional[Node]) -> Iterator[Any]:
    """Preorder traversal with an explicit stack of pending right subtrees."""
    stack = SeqStack()
    node = root
    while node is not None or not stack.is_empty():
        if node is not None:
            yield node.data
            stack.push(node.right)
            node = node.left
        else:
            node = stack.pop()


def inorder(root: Optional[Node]) -> Iterator[Any]:
    """Recursive inorder traversal."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def inorder_iterative(root: Optional[Node]) -> Iterator[Any]:
    """Inorder traversal that keeps empty links on the stack as markers."""
    stack = SeqStack([root])
    while not stack.is_empty():
        while stack.top() is not None:
            stack.push(stack.top().left)
        stack.pop()
        if not stack.is_empty():
            node = stack.pop()
            yield node.data
            stack.push(node.right)


def inorder_iterative2(root: Optional[Node]) -> Iterator[Any]:
    """Inorder traversal that pushes only real nodes."""
    stack = SeqStack()
    node = root
    while node is not None or not stack.is_empty():
        if node is not None:
            stack.push(node)
            node = node.left
        else:
            node = stack.pop()
            yield node.data
            node = node.right


def postorder(root: Optional[Node]) -> Iterator[Any]:
    """Recursive postorder traversal."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data


def level_order(root: Optional[Node]) -> Iterator[Any]:
    """Breadth-first traversal, level by level from the left."""
    if root is None:
        return
    queue = LinkQueue([root])
    while not queue.is_empty():
        node = queue.dequeue()
        yield node.data
        if node.left is not None:
            queue.enqueue(node.left)
        if node.right is not None:
            queue.enqueue(node.right)


def contains(root: Optional[Node], node: Optional[Node]) -> bool:
    """True when ``node`` is one of the nodes of the tree."""
    return node is not None and any(n is node for n in _nodes(root))


def parent(root: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """The parent of ``node``, or None for the root or a node outside the tree."""
    if node is None:
        return None
    for candidate in _nodes(root):
        if candidate.left is node or candidate.right is node:
            return candidate
    return None


def left_sibling(root: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """The left sibling of ``node``; None when it is a left child or has none."""
    up = parent(root, node)
    if up is None or up.left is node:
        return None
    return up.left


def right_sibling(root: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """The right sibling of ``node``; None when it is a right child or has none."""
    up = parent(root, node)
    if up is None or up.right is node:
        return None
    return up.right


def insert_child(root: Optional[Node], node: Node, side: Side, child: Node) -> None:
    """Make ``child`` the ``side`` subtree of ``node``.

    The previous subtree on that side becomes the right subtree of ``child``,
    which must therefore have no right subtree of its own.
    """
    side = Side(side)
    if root is None or not contains(root, node):
        raise ValueError("node is not in the tree")
    if child is None:
        raise ValueError("child must be a node")
    if child.right is not None:
        raise ValueError("child must have an empty right subtree")
    if contains(root, child):
        raise ValueError("child already belongs to the tree")
    if side is Side.LEFT:
        child.right, node.left = node.left, child
    else:
        child.right, node.right = node.right, child


def delete_child(root: Optional[Node], node: Node, side: Side) -> Optional[Node]:
    """Detach the ``side`` subtree of ``node`` and return it."""
    side = Side(side)
    if not contains(root, node):
        raise ValueError("node is not in the tree")
    if side is Side.LEFT:
        removed, node.left = node.left, None
    else:
        removed, node.right = node.right, None
    return removed