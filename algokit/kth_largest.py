"""The k-th largest element of a sequence."""

from __future__ import annotations

import heapq
from typing import Sequence


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value, counting duplicates separately.

    Raises ValueError unless ``1 <= k <= len(nums)``.
    """
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]