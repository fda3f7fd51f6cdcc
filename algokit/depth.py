"""Maximum and minimum depth of a binary tree."""

from __future__ import annotations

from typing import Optional

from .tree import TreeNode


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    if root.left is None:
        return 1 + max_depth(root.right)
    if root.right is None:
        return 1 + max_depth(root.left)
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest path from the root down to a leaf.

    A node with a single child is not a leaf, so the path continues
    through that child.
    """
    if root is None:
        return 0
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))