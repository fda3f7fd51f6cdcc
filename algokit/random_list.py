"""Deep copy of a linked list whose nodes carry an extra random link."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class RandomListNode:
    """A list node with a ``next`` link and a ``random`` link to any node."""

    label: int
    next: Optional[RandomListNode] = None
    random: Optional[RandomListNode] = None


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Return a deep copy of the list starting at ``head``.

    Copies are first woven in after each original, then given their random
    links, then split off. The original list is left as it was.
    """
    if head is None:
        return None

    node = head
    while node is not None:
        clone = RandomListNode(node.label, node.next)
        node.next = clone
        node = clone.next

    node = head
    while node is not None:
        clone = node.next
        if node.random is not None:
            clone.random = node.random.next
        node = clone.next

    clone_head = head.next
    node = head
    while node is not None:
        clone = node.next
        node.next = clone.next
        clone.next = node.next.next if node.next is not None else None
        node = node.next
    return clone_head