"""Inorder, preorder and postorder traversals of a binary tree."""

from __future__ import annotations

from typing import Optional

from .tree import TreeNode


def inorder_recursive(root: Optional[TreeNode]) -> list[int]:
    """Left, root, right, by recursion."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        visit(node.left)
        result.append(node.val)
        visit(node.right)

    visit(root)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Left, root, right, with an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def inorder_morris(root: Optional[TreeNode]) -> list[int]:
    """Left, root, right, using threaded links and no stack.

    The tree is modified while walking but restored by the end.
    """
    result: list[int] = []
    node = root
    while node is not None:
        if node.left is None:
            result.append(node.val)
            node = node.right
            continue
        pred = node.left
        while pred.right is not None and pred.right is not node:
            pred = pred.right
        if pred.right is None:
            pred.right = node
            node = node.left
        else:
            pred.right = None
            result.append(node.val)
            node = node.right
    return result


def preorder_recursive(root: Optional[TreeNode]) -> list[int]:
    """Root, left, right, by recursion."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        result.append(node.val)
        visit(node.left)
        visit(node.right)

    visit(root)
    return result


def preorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Root, left, right, with an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            result.append(node.val)
            node = node.left
        node = stack.pop().right
    return result


def postorder_recursive(root: Optional[TreeNode]) -> list[int]:
    """Left, right, root, by recursion."""
    result: list[int] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        result.append(node.val)

    visit(root)
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[int]:
    """Left, right, root, with one stack and the last visited node."""
    if root is None:
        return []
    result: list[int] = []
    stack: list[TreeNode] = [root]
    last: TreeNode = root
    while stack:
        node = stack[-1]
        if node.left is not None and last is not node.left and last is not node.right:
            stack.append(node.left)
        elif node.right is not None and last is not node.right:
            stack.append(node.right)
        else:
            last = stack.pop()
            result.append(last.val)
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Left, right, root, by reversing a root, right, left walk."""
    if root is None:
        return []
    pending: list[TreeNode] = [root]
    output: list[TreeNode] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.val for node in reversed(output)]