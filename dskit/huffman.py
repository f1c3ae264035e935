"""Huffman trees and codes stored as a table of nodes linked by order numbers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

NO_LINK = 0


@dataclass
class HuffmanNode:
    """A node of the tree; links are 1-based order numbers, 0 meaning none."""

    symbol: str
    weight: int
    parent: int = NO_LINK
    left: int = NO_LINK
    right: int = NO_LINK

    @property
    def is_leaf(self) -> bool:
        return self.left == NO_LINK and self.right == NO_LINK


class HuffmanCoding:
    """The Huffman tree and code table for a set of weighted symbols."""

    def __init__(self, symbols: Iterable[str], weights: Iterable[int]) -> None:
        symbols = list(symbols)
        weights = list(weights)
        if len(symbols) != len(weights):
            raise ValueError("symbols and weights differ in length")
        if len(symbols) < 2:
            raise ValueError("at least two symbols are needed")
        if len(set(symbols)) != len(symbols):
            raise ValueError("symbols must be distinct")
        if any(w < 0 for w in weights):
            raise ValueError("weights must not be negative")

        n = len(symbols)
        nodes = [HuffmanNode(s, w) for s, w in zip(symbols, weights)]
        for order in range(n + 1, 2 * n):
            s1, s2 = self._select(nodes)
            nodes[s1 - 1].parent = order
            nodes[s2 - 1].parent = order
            nodes.append(
                HuffmanNode("", nodes[s1 - 1].weight + nodes[s2 - 1].weight, NO_LINK, s1, s2)
            )
        self.nodes = tuple(nodes)
        self._count = n
        self._codes = {
            nodes[i - 1].symbol: self._code_of(i) for i in range(1, n + 1)
        }

    @staticmethod
    def _select(nodes: list[HuffmanNode]) -> tuple[int, int]:
        """Order numbers of the two lightest parentless nodes, lowest order on ties."""
        free = [(node.weight, order) for order, node in enumerate(nodes, start=1)
                if node.parent == NO_LINK]
        free.sort()
        return free[0][1], free[1][1]

    def _node(self, order: int) -> HuffmanNode:
        return self.nodes[order - 1]

    def _code_of(self, order: int) -> str:
        bits = []
        child, up = order, self._node(order).parent
        while up != NO_LINK:
            bits.append("0" if self._node(up).left == child else "1")
            child, up = up, self._node(up).parent
        return "".join(reversed(bits))

    @property
    def root(self) -> int:
        """Order number of the root."""
        return len(self.nodes)

    def codes(self) -> dict[str, str]:
        """Map each symbol to its code, in the order the symbols were given."""
        return dict(self._codes)

    def encode(self, text: Iterable[str]) -> str:
        """Concatenate the codes of the symbols in ``text``."""
        try:
            return "".join(self._codes[symbol] for symbol in text)
        except KeyError as exc:
            raise ValueError(f"symbol {exc.args[0]!r} has no code") from None

    def decode(self, bits: str) -> str:
        """Translate a string of '0' and '1' back into symbols."""
        out = []
        order = self.root
        for bit in bits:
            if bit not in "01":
                raise ValueError(f"invalid bit {bit!r}")
            node = self._node(order)
            order = node.left if bit == "0" else node.right
            leaf = self._node(order)
            if leaf.is_leaf:
                out.append(leaf.symbol)
                order = self.root
        if order != self.root:
            raise ValueError("bit string ends in the middle of a code")
        return "".join(out)

    def tree_table(self) -> str:
        """Render every node with its weight and links."""
        lines = ["   ch    order   weight  parent  lchild  rchild "]
        for order, node in enumerate(self.nodes, start=1):
            ch = node.symbol or " "
            lines.append(
                f"   {ch}       {order:2}      {node.weight:3}     {node.parent:2}"
                f"      {node.left:2}      {node.right:2}   "
            )
        return "\n".join(lines)

    def code_table(self) -> str:
        """Render each leaf symbol with its weight and code."""
        lines = ["   ch    order   weight           Code  "]
        for order, node in enumerate(self.nodes[: self._count], start=1):
            lines.append(
                f"   {node.symbol}       {order:2}      {node.weight:2}     ---->  "
                f"{self._codes[node.symbol]:<8}"
            )
        return "\n".join(lines)