"""String splitting and bounded duplication."""

from __future__ import annotations


def _check(text: str, delimiter: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on every ``delimiter``, dropping empty tokens."""
    _check(text, delimiter)
    return [token for token in text.split(delimiter) if token]


def split_last(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on the last ``delimiter``.

    A delimiter at the very start or end yields a single token without it;
    no delimiter yields the whole text; empty text yields no tokens.
    """
    _check(text, delimiter)
    if not text:
        return []
    position = text.rfind(delimiter)
    if position == -1:
        return [text]
    if position == 0:
        return [text[1:]]
    if position == len(text) - 1:
        return [text[:-1]]
    return [text[:position], text[position + 1:]]


def strndup(text: str, length: int) -> str:
    """Return at most ``length`` characters of ``text``, stopping at a NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    if length < 0:
        raise ValueError("length cannot be negative")
    return text[:length].split("\0", 1)[0]