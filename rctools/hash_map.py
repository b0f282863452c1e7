"""A separately chained hash map driven by caller-supplied hash and compare functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from rctools.hash_support import KeyNotFoundError, NoMoreEntriesError

_LOAD_FACTOR_NUMERATOR = 3
_LOAD_FACTOR_DENOMINATOR = 4
_SIZE_MASK = (1 << 64) - 1

KeyHasher = Callable[[Any], int]
KeyCompare = Callable[[Any, Any], int]


@dataclass
class _Entry:
    hashed_key: int
    key: Any
    value: Any


@dataclass(frozen=True)
class _Location:
    hashed_key: int
    map_index: int
    bucket_index: int | None
    entry: _Entry | None


class HashMap:
    """Map keys to values using a user-defined hasher and three-way comparator.

    The number of buckets (the capacity) doubles whenever the number of
    entries reaches three quarters of it; it never shrinks.
    """

    def __init__(self, initial_capacity: int, key_hasher: KeyHasher, key_compare: KeyCompare) -> None:
        if key_hasher is None or not callable(key_hasher):
            raise TypeError("key_hasher must be callable")
        if key_compare is None or not callable(key_compare):
            raise TypeError("key_compare must be callable")
        if initial_capacity < 1:
            raise ValueError("initial_capacity cannot be less than 1")
        self._hasher = key_hasher
        self._compare = key_compare
        self._buckets: list[list[_Entry]] = [[] for _ in range(initial_capacity)]
        self._size = 0

    def capacity(self) -> int:
        """Return the number of buckets currently in use."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def _hash(self, key: Any) -> int:
        return int(self._hasher(key)) & _SIZE_MASK

    def _find(self, key: Any) -> _Location:
        hashed = self._hash(key)
        map_index = hashed % len(self._buckets)
        for position, entry in enumerate(self._buckets[map_index]):
            if entry.hashed_key == hashed and self._compare(entry.key, key) == 0:
                return _Location(hashed, map_index, position, entry)
        return _Location(hashed, map_index, None, None)

    def _grow_if_needed(self) -> None:
        capacity = len(self._buckets)
        if self._size * _LOAD_FACTOR_DENOMINATOR < capacity * _LOAD_FACTOR_NUMERATOR:
            return
        new_capacity = 2 * capacity
        new_buckets: list[list[_Entry]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[entry.hashed_key % new_capacity].append(entry)
        self._buckets = new_buckets

    def set(self, key: Any, value: Any) -> None:
        """Insert ``key`` with ``value``, or replace the value of an existing key."""
        if key is None:
            raise ValueError("key must not be None")
        if value is None:
            raise ValueError("value must not be None")
        location = self._find(key)
        if location.entry is not None:
            location.entry.value = value
        else:
            self._buckets[location.map_index].append(_Entry(location.hashed_key, key, value))
            self._size += 1
        self._grow_if_needed()

    def unset(self, key: Any) -> None:
        """Remove ``key`` if present; a missing key is not an error."""
        if key is None:
            raise ValueError("key must not be None")
        location = self._find(key)
        if location.bucket_index is None:
            return
        del self._buckets[location.map_index][location.bucket_index]
        self._size -= 1

    def key_exists(self, key: Any) -> bool:
        """Return whether ``key`` is in the map; ``None`` is never present."""
        if key is None:
            return False
        return self._find(key).entry is not None

    def __contains__(self, key: Any) -> bool:
        return self.key_exists(key)

    def get(self, key: Any) -> Any:
        """Return the value stored for ``key``; raise KeyNotFoundError if absent."""
        if key is None:
            raise ValueError("key must not be None")
        entry = self._find(key).entry
        if entry is None:
            raise KeyNotFoundError(key)
        return entry.value

    def next_key_and_data(self, previous_key: Any = None) -> tuple[Any, Any]:
        """Return the entry after ``previous_key``, or the first one when it is None.

        Raises KeyNotFoundError if ``previous_key`` is not in the map and
        NoMoreEntriesError when there is no further entry.
        """
        map_index = 0
        bucket_index = 0
        if previous_key is not None:
            location = self._find(previous_key)
            if location.bucket_index is None:
                raise KeyNotFoundError(previous_key)
            map_index = location.map_index
            bucket_index = location.bucket_index + 1
        for bucket in self._buckets[map_index:]:
            if bucket_index < len(bucket):
                entry = bucket[bucket_index]
                return entry.key, entry.value
            bucket_index = 0
        raise NoMoreEntriesError()

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every (key, value) pair in bucket order."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def clear(self) -> None:
        """Remove every entry, keeping the current capacity."""
        self._buckets = [[] for _ in range(len(self._buckets))]
        self._size = 0