"""Search and insertion in a binary search tree."""

from __future__ import annotations

from typing import Optional

from .tree import TreeNode


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree rooted at the node holding ``val``, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def search_bst_recursive(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the subtree rooted at the node holding ``val``, or None."""
    if root is None or root.val == val:
        return root
    if root.val < val:
        return search_bst_recursive(root.right, val)
    return search_bst_recursive(root.left, val)


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf and return the root.

    A value already in the tree leaves it unchanged.
    """
    if root is None:
        return TreeNode(val)
    if root.val < val:
        root.right = insert_into_bst(root.right, val)
    elif root.val > val:
        root.left = insert_into_bst(root.left, val)
    return root


def insert_into_bst_iterative(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf without recursion and return the root.

    A value already in the tree leaves it unchanged.
    """
    if root is None:
        return TreeNode(val)
    node = root
    while True:
        if node.val < val:
            if node.right is None:
                node.right = TreeNode(val)
                break
            node = node.right
        elif node.val > val:
            if node.left is None:
                node.left = TreeNode(val)
                break
            node = node.left
        else:
            break
    return root