"""Small utilities: a custom-hash map with its key helpers, time helpers and string splitting."""

__version__ = "0.1.0"
__all__ = ["hash_support", "hash_map", "timeutil", "strings"]