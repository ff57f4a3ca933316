"""String and byte-buffer helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "memcmp",
    "memchr",
    "strchr",
    "strrchr",
]

_NUL = "\0"


def _as_char(char: str | int) -> str:
    """Return ``char`` as a one-character string."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, int) and not isinstance(char, bool):
        return chr(char & 0xFF)
    raise TypeError(f"expected a character or an int, got {type(char).__name__}")


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str | int) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces.

    A NUL separator never occurs inside the text, so a non-empty text then
    comes back as a single piece.
    """
    sep_char = _as_char(sep)
    if sep_char == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(sep_char) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_count("start", start)
    _check_count("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    _check_count("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch; a
    string that ends first compares as if followed by code 0. Equal prefixes
    give 0.
    """
    _check_count("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _check_count("n", n)
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of shorter buffers")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def memchr(data: bytes, byte: int, n: int) -> int | None:
    """Return the index of the first ``byte`` within the first ``n`` bytes, or None."""
    _check_count("n", n)
    if n > len(data):
        raise ValueError(f"cannot search {n} bytes of a {len(data)}-byte buffer")
    index = bytes(data).find(byte & 0xFF, 0, n)
    return None if index < 0 else index


def strchr(text: str, char: str | int) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    A NUL character is found at the end of the text.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: str | int) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    A NUL character is found at the end of the text.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index