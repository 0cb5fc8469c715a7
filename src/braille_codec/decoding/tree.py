"""
Braille Symbol Tree
===================

A fixed-depth binary trie that maps 6-bit dot patterns to characters.

The pattern itself is the path through the tree. Bits are consumed from
least to most significant; a clear bit steps to the left child, a set bit
to the right child. After six steps the walk arrives at a leaf, and only
leaves carry a symbol. Intermediate nodes are pure navigation nodes and
are shared by every pattern with the same low-order bits.

    root
     ├─ 0 (dot 1 flat) ...
     └─ 1 (dot 1 raised)
          ├─ 0 (dot 2 flat) ...
          └─ 1 (dot 2 raised) ... -> 'b' at depth 6 for pattern 0b000011

The tree is built once and only read afterwards. There is no deletion
and no rebalancing.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from braille_codec.cell import PATTERN_BITS
from braille_codec.encoding.encoder import BrailleEncoder

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    """
    One node of the symbol tree.

    Attributes:
        left: Child for a clear bit
        right: Child for a set bit
        symbol: Decoded character, set on leaves only
    """
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    symbol: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BrailleSymbolTree:
    """
    Trie of every supported character, keyed by its dot pattern.

    Construction inserts the space (pattern 0) and the letters a-z.

    Example:
        >>> tree = BrailleSymbolTree(BrailleEncoder())
        >>> tree.lookup(0b010011).symbol
        'h'
        >>> tree.lookup(0b111111) is None
        True
    """

    def __init__(self, encoder: BrailleEncoder):
        self._encoder = encoder
        self._root = TreeNode()
        for character in encoder.supported_characters():
            self.insert(character)
        logger.debug(f"Built symbol tree with {len(self)} symbols")

    @property
    def root(self) -> TreeNode:
        return self._root

    def insert(self, character: str) -> None:
        """
        Store a character at the leaf addressed by its dot pattern.

        Missing nodes along the path are created. The symbol is attached
        when the leaf is created; a leaf that already exists keeps the
        symbol it was given first.
        """
        pattern = self._encoder.to_pattern(character)
        node = self._root
        for bit in range(PATTERN_BITS):
            last = bit == PATTERN_BITS - 1
            if pattern & (1 << bit):
                if node.right is None:
                    node.right = TreeNode(symbol=character if last else None)
                node = node.right
            else:
                if node.left is None:
                    node.left = TreeNode(symbol=character if last else None)
                node = node.left

    def lookup(self, pattern: int) -> Optional[TreeNode]:
        """
        Follow a dot pattern from the root.

        Returns:
            The node reached after six steps, or None if the path leaves
            the tree early
        """
        node: Optional[TreeNode] = self._root
        for bit in range(PATTERN_BITS):
            node = node.right if pattern & (1 << bit) else node.left
            if node is None:
                break
        return node

    # =========================================================================
    # Introspection
    # =========================================================================

    def _leaves(self, node: TreeNode) -> Iterator[TreeNode]:
        if node.is_leaf:
            yield node
            return
        for child in (node.left, node.right):
            if child is not None:
                yield from self._leaves(child)

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path."""
        def walk(node: Optional[TreeNode]) -> int:
            if node is None or node.is_leaf:
                return 0
            return 1 + max(walk(node.left), walk(node.right))
        return walk(self._root)

    def __len__(self) -> int:
        """Number of leaves carrying a symbol."""
        return sum(1 for leaf in self._leaves(self._root) if leaf.symbol is not None)
