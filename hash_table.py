# Custom Hash Table (separate chaining + front insertion) for named places
# Key: place name (str). Many places share a name, so every insert is kept.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from models import Place

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 101
LOAD_FACTOR = 0.75
HASH_PRIME = 31


def hash_function(key: str, capacity: int) -> int:
    """Polynomial (Horner) string hash over the key's Unicode code points.

    Reduced modulo capacity at every step, then once more on return.
    """
    h = 0
    for c in key:
        h = (h * HASH_PRIME + ord(c)) % capacity
    return h % capacity


class HashTable:
    def __init__(self, initial_capacity=DEFAULT_CAPACITY):
        if initial_capacity < 1:
            raise ValueError(f'initial_capacity must be at least 1, got {initial_capacity}')
        self._capacity = initial_capacity
        # Each chain is a list with the head (most recently linked) at index 0.
        self._buckets: List[List[Place]] = [[] for _ in range(initial_capacity)]
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[Place]:
        for bucket in self._buckets:
            yield from bucket

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def _index(self, name: str) -> int:
        return hash_function(name, self._capacity)

    def resize(self) -> None:
        """Double the capacity and relink every place into the new buckets.

        Old buckets are drained in index order, each chain head first, and every
        place is linked at the front of its new chain. Places that land in the
        same new bucket therefore end up in reverse encounter order.
        """
        old = self._buckets
        self._capacity *= 2
        self._buckets = [[] for _ in range(self._capacity)]
        for bucket in old:
            for place in bucket:
                self._buckets[self._index(place.name)].insert(0, place)
        logger.debug('Resized hash table %d -> %d buckets (%d places)',
                     len(old), self._capacity, self._size)

    def insert(self, place: Place) -> None:
        # The load check runs on the size before this insert.
        if self._size / self._capacity > LOAD_FACTOR:
            self.resize()
        self._buckets[self._index(place.name)].insert(0, place)
        self._size += 1

    def find_by_name(self, name: str) -> List[Place]:
        """Return every place called `name`, most recently inserted first.

        Matching is exact (case-sensitive, no trimming). Returns [] if none.
        """
        return [p for p in self._buckets[self._index(name)] if p.name == name]

    def find_by_name_and_state(self, name: str, state: str) -> Optional[Place]:
        """Return the first place in `name`'s chain that is in `state`, or None."""
        for p in self._buckets[self._index(name)]:
            if p.name == name and p.region == state:
                return p
        return None

    def clear(self) -> None:
        """Release every chain. Capacity is kept; the table never shrinks."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    # Helpers for tests/debug
    def bucket(self, index: int) -> Tuple[Place, ...]:
        return tuple(self._buckets[index])

    def first_n_buckets(self, n=10) -> List[Tuple[Place, ...]]:
        return [tuple(b) for b in self._buckets[:n]]
