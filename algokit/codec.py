"""Text serialization of binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .tree import TreeNode

_NULL = "#"


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("serialized tree ends too early") from None


class PreorderCodec:
    """Encodes a tree as its preorder walk, with ``#`` for empty links."""

    def serialize(self, root: Optional[TreeNode]) -> str:
        parts: list[str] = []

        def walk(node: Optional[TreeNode]) -> None:
            if node is None:
                parts.append(_NULL)
                return
            parts.append(str(node.val))
            walk(node.left)
            walk(node.right)

        walk(root)
        return "".join(f"{part} " for part in parts)

    def deserialize(self, data: str) -> Optional[TreeNode]:
        tokens = iter(data.split())

        def read() -> Optional[TreeNode]:
            token = _next_token(tokens)
            if token == _NULL:
                return None
            node = TreeNode(int(token))
            node.left = read()
            node.right = read()
            return node

        return read()


class LevelOrderCodec:
    """Encodes a tree level by level, with ``#`` for empty links."""

    def serialize(self, root: Optional[TreeNode]) -> str:
        if root is None:
            return ""
        parts: list[str] = []
        queue: deque[Optional[TreeNode]] = deque([root])
        while queue:
            node = queue.popleft()
            if node is None:
                parts.append(_NULL)
                continue
            parts.append(str(node.val))
            queue.append(node.left)
            queue.append(node.right)
        return "".join(f"{part} " for part in parts)

    def deserialize(self, data: str) -> Optional[TreeNode]:
        if data == "":
            return None
        tokens = iter(data.split())
        root = TreeNode(int(_next_token(tokens)))
        queue: deque[TreeNode] = deque([root])
        while queue:
            node = queue.popleft()
            token = _next_token(tokens)
            if token != _NULL:
                node.left = TreeNode(int(token))
                queue.append(node.left)
            token = _next_token(tokens)
            if token != _NULL:
                node.right = TreeNode(int(token))
                queue.append(node.right)
        return root