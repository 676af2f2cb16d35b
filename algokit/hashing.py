"""Hash tables keyed by strings, bucketed on the first byte of the key."""

from __future__ import annotations

from typing import Any


def first_char_hash(key: str, capacity: int) -> int:
    """Bucket index of *key*: its first byte modulo *capacity*."""
    if not key:
        raise ValueError("key is empty")
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return key.encode()[0] % capacity


class ChainedHashTable:
    """Separate-chaining table.

    Setting a key that is already present adds another entry; lookups and
    deletions act on the earliest entry for a key.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(capacity)]
        self._count = 0

    def _bucket(self, key: str) -> list[tuple[str, Any]]:
        return self._buckets[first_char_hash(key, self.capacity)]

    def set(self, key: str, value: Any) -> None:
        self._bucket(key).append((key, value))
        self._count += 1

    def get(self, key: str) -> Any:
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def delete(self, key: str) -> None:
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._count -= 1
                return
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count


class BoundedHashTable:
    """Chained table holding at most ``capacity`` keys; setting a key overwrites it.

    A capacity of 0 selects the default of 10. Once the table holds
    ``capacity`` keys, every further set fails, overwrites included.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity == 0:
            capacity = 10
        if not 0 < capacity <= 255:
            raise ValueError("capacity must be between 1 and 255")
        self.capacity = capacity
        self._buckets: list[list[list[Any]]] = [[] for _ in range(capacity)]
        self._count = 0

    def _bucket(self, key: str) -> list[list[Any]]:
        return self._buckets[first_char_hash(key, self.capacity)]

    def set(self, key: str, value: Any) -> None:
        if self._count + 1 > self.capacity:
            raise OverflowError("hash table is full")
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])
        self._count += 1

    def get(self, key: str) -> Any:
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count