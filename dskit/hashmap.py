"""A fixed-size bucketed hash map with a caller-supplied hash function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Optional, TypeVar

MOD_ADLER = 65521
_U32 = 0xFFFFFFFF

K = TypeVar("K")
V = TypeVar("V")


def adler32(data: bytes) -> int:
    """Return the Adler-32 checksum of ``data``."""
    a, b = 1, 0
    for byte in data:
        a = (a + byte) % MOD_ADLER
        b = (b + a) % MOD_ADLER
    return (b << 16) | a


def hashcode(data: bytes) -> int:
    """Return a simple 32-bit xor-and-shift hash of ``data``."""
    a = 0
    for i, byte in enumerate(data):
        a ^= byte
        a = (a << (i % 4)) & _U32
    return a


@dataclass
class LocationInformation:
    """Details kept about a location."""

    name: str
    opened: str
    address: str
    security_group_name: str


class HashMap(Generic[K, V]):
    """Hash map with a fixed number of buckets chosen at construction.

    The bucket of a key is ``hash_fn(key) & (buckets - 1)``, so the bucket
    count should be a power of two for an even spread.
    """

    def __init__(self, hash_fn: Callable[[K], int], length: int) -> None:
        if length < 1:
            raise ValueError("a hash map needs at least one bucket")
        self._hash_fn = hash_fn
        self._store: list[list[tuple[K, V]]] = [[] for _ in range(length)]
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def _bucket(self, key: K) -> list[tuple[K, V]]:
        return self._store[self._hash_fn(key) & (len(self._store) - 1)]

    def get(self, key: K) -> Optional[V]:
        """Return the value stored under ``key``, or ``None``."""
        return next((v for k, v in self._bucket(key) if k == key), None)

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or ``None`` if absent."""
        bucket = self._bucket(key)
        for pos, (k, _) in enumerate(bucket):
            if k == key:
                self._length -= 1
                return bucket.pop(pos)[1]
        return None

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._bucket(key)
        for pos, (k, _) in enumerate(bucket):
            if k == key:
                bucket[pos] = (key, value)
                return
        bucket.append((key, value))
        self._length += 1


LocationCache = HashMap[str, LocationInformation]