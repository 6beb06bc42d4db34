from dataclasses import dataclass
import logging
from typing import Generic, Iterator, TypeVar

from .hashing import bucket_index


log = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass
class Entry(Generic[V]):
    key: str
    value: V


@dataclass
class Found(Generic[V]):
    value: V


@dataclass
class NotFound:
    pass


Bucket = list[Entry[V]]


INITIAL_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75


def new_buckets(capacity: int) -> list[Bucket]:
    return [[] for _ in range(capacity)]


class HashTable(Generic[V]):
    """Separate-chaining hash table with string keys.

    Order of keys(), values() and entries() follows the bucket layout and
    changes whenever the table grows.
    """

    capacity: int
    load_factor: float
    size: int
    buckets: list[Bucket]

    def __init__(self, load_factor: float = DEFAULT_LOAD_FACTOR) -> None:
        if load_factor <= 0:
            raise ValueError(f"load factor must be positive, got {load_factor!r}")

        self.capacity = INITIAL_CAPACITY
        self.load_factor = load_factor
        self.buckets = new_buckets(self.capacity)
        self.size = 0

    def hash(self, key: str) -> int:
        return bucket_index(key, self.capacity)

    def set(self, key: str, value: V) -> None:
        if not self._insert(key, value):
            return

        while self._overloaded():
            self._resize()

    def get(self, key: str) -> Found[V] | NotFound:
        entry = self._find_entry(key)
        if entry is None:
            return NotFound()
        return Found(entry.value)

    def has(self, key: str) -> bool:
        for entry in self.buckets[self.hash(key)]:
            if entry.key == key:
                return True
        return False

    def remove(self, key: str) -> bool:
        return self._delete_entry(key) is not None

    def pop(self, key: str) -> Found[V] | NotFound:
        entry = self._delete_entry(key)
        if entry is None:
            return NotFound()
        return Found(entry.value)

    def length(self) -> int:
        return self.size

    def clear(self) -> None:
        log.debug("clearing %d entries, capacity stays %d", self.size, self.capacity)
        self.buckets = new_buckets(self.capacity)
        self.size = 0

    def keys(self) -> list[str]:
        return [entry.key for bucket in self.buckets for entry in bucket]

    def values(self) -> list[V]:
        return [entry.value for bucket in self.buckets for entry in bucket]

    def entries(self) -> list[tuple[str, V]]:
        return [(entry.key, entry.value) for bucket in self.buckets for entry in bucket]

    def _find_entry(self, key: str) -> Entry[V] | None:
        for entry in self.buckets[self.hash(key)]:
            if entry.key == key:
                return entry
        return None

    def _delete_entry(self, key: str) -> Entry[V] | None:
        bucket = self.buckets[self.hash(key)]
        for i in range(len(bucket)):
            if bucket[i].key == key:
                self.size -= 1
                return bucket.pop(i)
        return None

    def _insert(self, key: str, value: V) -> bool:
        """Returns True if a new entry was appended, False on overwrite."""
        bucket = self.buckets[self.hash(key)]
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return False

        bucket.append(Entry(key, value))
        self.size += 1
        return True

    def _overloaded(self) -> bool:
        return self.size > self.load_factor * self.capacity

    def _resize(self) -> None:
        old_buckets = self.buckets
        log.debug(
            "resizing from %d to %d buckets (%d entries)",
            self.capacity,
            self.capacity * 2,
            self.size,
        )

        self.capacity *= 2
        self.buckets = new_buckets(self.capacity)
        self.size = 0

        for bucket in old_buckets:
            for entry in bucket:
                self._insert(entry.key, entry.value)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __getitem__(self, key: str) -> V:
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: str, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (
            f"HashTable(size={self.size}, capacity={self.capacity}, "
            f"load_factor={self.load_factor})"
        )
