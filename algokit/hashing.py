"""A hash set and a hash map of small non-negative integer keys."""

from __future__ import annotations

from typing import Optional

_BUCKETS = 1000
_SLOTS = 1000
KEY_LIMIT = _BUCKETS * _SLOTS


def _slot(key: int) -> tuple[int, int]:
    if not 0 <= key < KEY_LIMIT:
        raise ValueError(f"key must be in [0, {KEY_LIMIT}), got {key}")
    return key % _BUCKETS, key // _BUCKETS


def _in_range(key: object) -> bool:
    return isinstance(key, int) and 0 <= key < KEY_LIMIT


class BucketHashSet:
    """A set of integers in ``[0, 1000000)`` held in lazily created buckets."""

    def __init__(self) -> None:
        self._buckets: list[Optional[bytearray]] = [None] * _BUCKETS

    def add(self, key: int) -> None:
        """Add ``key``; raises ValueError if it is out of range."""
        bucket_index, slot = _slot(key)
        bucket = self._buckets[bucket_index]
        if bucket is None:
            bucket = self._buckets[bucket_index] = bytearray(_SLOTS)
        bucket[slot] = 1

    def remove(self, key: int) -> None:
        """Remove ``key`` if present; otherwise do nothing."""
        if not _in_range(key):
            return
        bucket_index, slot = _slot(key)
        bucket = self._buckets[bucket_index]
        if bucket is not None:
            bucket[slot] = 0

    def __contains__(self, key: object) -> bool:
        if not _in_range(key):
            return False
        bucket_index, slot = _slot(key)  # type: ignore[arg-type]
        bucket = self._buckets[bucket_index]
        return bucket is not None and bucket[slot] == 1


class BucketHashMap:
    """A map from integers in ``[0, 1000000)`` to non-negative integers.

    A missing key reads as -1.
    """

    def __init__(self) -> None:
        self._buckets: list[Optional[list[int]]] = [None] * _BUCKETS

    def put(self, key: int, value: int) -> None:
        """Set ``key`` to ``value``; raises ValueError if the key is out of range."""
        bucket_index, slot = _slot(key)
        bucket = self._buckets[bucket_index]
        if bucket is None:
            bucket = self._buckets[bucket_index] = [-1] * _SLOTS
        bucket[slot] = value

    def get(self, key: int) -> int:
        """Return the value for ``key``, or -1 if there is none."""
        if not _in_range(key):
            return -1
        bucket_index, slot = _slot(key)
        bucket = self._buckets[bucket_index]
        if bucket is None:
            return -1
        return bucket[slot]

    def remove(self, key: int) -> None:
        """Remove ``key`` if present; otherwise do nothing."""
        if not _in_range(key):
            return
        bucket_index, slot = _slot(key)
        bucket = self._buckets[bucket_index]
        if bucket is not None:
            bucket[slot] = -1