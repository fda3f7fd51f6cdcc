"""Rebuild a binary tree from its preorder and inorder traversals."""

from __future__ import annotations

from typing import Optional, Sequence

from .tree import TreeNode


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Build the tree whose traversals are ``preorder`` and ``inorder``.

    Values are assumed to be distinct.
    """
    next_index = 0

    def build(start: int, end: int) -> Optional[TreeNode]:
        nonlocal next_index
        if next_index >= len(preorder) or start > end:
            return None
        value = preorder[next_index]
        try:
            pos = inorder.index(value, start, end)
        except ValueError:
            pos = end
        next_index += 1
        node = TreeNode(value)
        node.left = build(start, pos - 1)
        node.right = build(pos + 1, end)
        return node

    return build(0, len(preorder) - 1)