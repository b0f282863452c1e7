"""Key helpers and error types shared by the hash map."""

from __future__ import annotations

from typing import Any

_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1


class HashMapError(Exception):
    """Base class for hash map errors."""


class KeyNotFoundError(HashMapError, KeyError):
    """Raised when a key is not present in the map."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class NoMoreEntriesError(HashMapError, LookupError):
    """Raised when iteration has passed the last entry of the map."""

    def __init__(self, message: str = "no more entries in the hash map") -> None:
        super().__init__(message)


def _as_c_bytes(value: str | bytes | bytearray) -> bytes:
    """Return the bytes of a key up to (not including) the first NUL byte."""
    if isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise TypeError(f"string key must be str or bytes, not {type(value).__name__}")
    return data.split(b"\0", 1)[0]


def string_hash(key: str | bytes | bytearray) -> int:
    """Return the djb2 hash of a string key as an unsigned 64-bit value.

    Bytes are treated as signed chars, and hashing stops at the first NUL.
    """
    value = _HASH_SEED
    for byte in _as_c_bytes(key):
        char = byte - 256 if byte >= 128 else byte
        value = (value * 33 + char) & _HASH_MASK
    return value


def string_compare(first: str | bytes | bytearray, second: str | bytes | bytearray) -> int:
    """Compare two string keys byte-wise: negative, zero or positive."""
    left = _as_c_bytes(first)
    right = _as_c_bytes(second)
    return (left > right) - (left < right)