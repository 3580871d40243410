"""A hash table whose buckets are kept ordered by hash, then by key."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter

HASHMAP_SIZE = 1 << 20

_MASK = 0xFFFFFFFF
_entry_key = itemgetter(0, 1)


def djb2a_hash(data: bytes) -> int:
    """Return the 32-bit djb2a (xor variant) hash of *data*."""
    value = 5381
    for byte in data:
        value = (((value << 5) + value) ^ byte) & _MASK
    return value


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class HashMap:
    """Map byte-string keys to byte-string values.

    Each of the *size* buckets holds its entries sorted by
    ``(hash, key)``; inserting an existing key replaces its value.
    """

    def __init__(self, size: int = HASHMAP_SIZE) -> None:
        if size < 1:
            raise ValueError(f"hash map size must be positive, not {size}")
        self.size = size
        self._buckets: dict[int, list[tuple[int, bytes, bytes]]] = {}
        self._count = 0

    def _find(self, key: bytes) -> tuple[list[tuple[int, bytes, bytes]], int, bool, int]:
        digest = djb2a_hash(key)
        bucket = self._buckets.get(digest % self.size, [])
        index = bisect_left(bucket, (digest, key), key=_entry_key)
        found = index < len(bucket) and _entry_key(bucket[index]) == (digest, key)
        return bucket, index, found, digest

    def insert(self, key: bytes | str, value: bytes | str) -> None:
        """Store *value* under *key*, replacing any earlier value."""
        key = _as_bytes(key)
        value = _as_bytes(value)
        digest = djb2a_hash(key)
        bucket = self._buckets.setdefault(digest % self.size, [])
        index = bisect_left(bucket, (digest, key), key=_entry_key)
        if index < len(bucket) and _entry_key(bucket[index]) == (digest, key):
            bucket[index] = (digest, key, value)
            return
        bucket.insert(index, (digest, key, value))
        self._count += 1

    def get(self, key: bytes | str) -> bytes | None:
        """Return the value stored under *key*, or ``None`` if there is none."""
        bucket, index, found, _ = self._find(_as_bytes(key))
        return bucket[index][2] if found else None

    def clear(self) -> None:
        """Remove every entry."""
        self._buckets.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (bytes, bytearray, memoryview, str)):
            return False
        return self._find(_as_bytes(key))[2]