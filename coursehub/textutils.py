"""Small text helpers used throughout the course records."""

from __future__ import annotations

_WHITESPACE = " \t\n"


def trim(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def _require_char(ch: str, what: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"{what} must be a single character, got {ch!r}")


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` at every occurrence of the single character ``delim``.

    Every delimiter produces a boundary, so the result always has one more
    part than there are delimiters, empty parts included.
    """
    _require_char(delim, "delimiter")
    return text.split(delim)


def tokenize(text: str, delims: str) -> list[str]:
    """Split ``text`` at every character that appears in ``delims``."""
    delimiters = set(delims)
    parts: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch in delimiters:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def find_first(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub``, or -1."""
    return text.find(sub)


def find_last(text: str, sub: str) -> int:
    """Return the index of the last occurrence of ``sub``, or -1."""
    return text.rfind(sub)


def find_all(text: str, sub: str) -> list[int]:
    """Return the start index of every occurrence of ``sub``, overlaps included."""
    return [
        start
        for start in range(len(text) - len(sub) + 1)
        if text.startswith(sub, start)
    ]


def insert_at(text: str, index: int, sub: str) -> str:
    """Return ``text`` with ``sub`` inserted before position ``index``.

    ``index`` may range from 0 to ``len(text)`` inclusive.
    """
    if not 0 <= index <= len(text):
        raise IndexError(f"insert position {index} out of range")
    return text[:index] + sub + text[index:]


def remove_at(text: str, index: int) -> str:
    """Return ``text`` without the character at ``index``."""
    if not 0 <= index < len(text):
        raise IndexError(f"index {index} out of range")
    return text[:index] + text[index + 1:]


def remove_first(text: str, ch: str) -> str:
    """Return ``text`` without the first occurrence of ``ch``."""
    _require_char(ch, "character")
    index = text.find(ch)
    if index == -1:
        raise ValueError(f"character {ch!r} not found")
    return remove_at(text, index)


def remove_last(text: str, ch: str) -> str:
    """Return ``text`` without the last occurrence of ``ch``."""
    _require_char(ch, "character")
    index = text.rfind(ch)
    if index == -1:
        raise ValueError(f"character {ch!r} not found")
    return remove_at(text, index)


def remove_all(text: str, ch: str) -> str:
    """Return ``text`` with every occurrence of ``ch`` removed."""
    _require_char(ch, "character")
    return text.replace(ch, "")


def _shift_ascii(text: str, low: str, high: str, offset: int) -> str:
    return "".join(chr(ord(c) + offset) if low <= c <= high else c for c in text)


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``; other characters are kept."""
    return _shift_ascii(text, "a", "z", -32)


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``; other characters are kept."""
    return _shift_ascii(text, "A", "Z", 32)


def int_to_string(value: int) -> str:
    """Render an integer in decimal."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return str(value)