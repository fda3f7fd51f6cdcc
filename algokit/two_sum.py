"""Find two positions in a list whose values add up to a target."""

from __future__ import annotations

from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[earlier, later]`` indices of two values summing to ``target``.

    A single pass with a value-to-index map. Returns an empty list when no
    pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def two_sum_reversed(nums: Sequence[int], target: int) -> list[int]:
    """Like :func:`two_sum`, but returns ``[later, earlier]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if target - value in seen:
            return [index, seen[target - value]]
        seen[value] = index
    return []


def two_sum_brute(nums: Sequence[int], target: int) -> list[int]:
    """Return the first ``[i, j]`` with ``i < j`` whose values sum to ``target``.

    Every value is compared with each value after it. The input is not
    modified. Returns an empty list when no pair exists.
    """
    for i, value in enumerate(nums):
        wanted = target - value
        for j, other in enumerate(nums[i + 1:], start=i + 1):
            if other == wanted:
                return [i, j]
    return []