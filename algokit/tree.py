"""Binary tree nodes and a simple unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_balanced(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ``values``.

    The values are sorted first; duplicates are kept. Each subtree is rooted
    at the upper middle element of its range.
    """
    ordered = sorted(values)

    def build(lo: int, hi: int) -> Optional[TreeNode]:
        if lo > hi:
            return None
        mid = (lo + hi + 1) // 2
        return TreeNode(ordered[mid], build(lo, mid - 1), build(mid + 1, hi))

    return build(0, len(ordered) - 1)


class BinarySearchTree:
    """A binary search tree of integers that ignores duplicate inserts."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.root: Optional[TreeNode] = (
            build_balanced(values) if values is not None else None
        )

    def insert(self, value: int) -> None:
        """Insert ``value`` unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value > node.val:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            elif value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                return

    def extend(self, values: Iterable[int]) -> None:
        """Insert every value in ``values`` in order."""
        for value in values:
            self.insert(value)

    def is_empty(self) -> bool:
        return self.root is None

    def __iter__(self) -> Iterator[int]:
        """Yield the values in order."""
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)