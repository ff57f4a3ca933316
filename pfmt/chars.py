"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

__all__ = [
    "atoi",
    "itoa",
    "isalnum",
    "isalpha",
    "isascii",
    "isdigit",
    "isprint",
    "toupper",
    "tolower",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_OVERFLOW_GUARD = 922337203685477580
_U64 = 1 << 64
_I32 = 1 << 32


def _code(c: str | int) -> int:
    """Return the character code of ``c``, a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _wrap_int32(value: int) -> int:
    value %= _I32
    return value - _I32 if value >= _I32 // 2 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A magnitude that grows past the 64-bit range gives -1 for
    positive input and 0 for negative input. Other results are reduced to
    the range of a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        if result > _OVERFLOW_GUARD:
            return 0 if sign == -1 else -1
        result = (result * 10 + ord(text[pos]) - ord("0")) % _U64
        pos += 1
    return _wrap_int32((result * sign) % _U64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: str | int) -> str | int:
    """Map a lower-case ASCII letter to upper case; other values pass through.

    The result has the same kind (string or int) as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: str | int) -> str | int:
    """Map an upper-case ASCII letter to lower case; other values pass through.

    The result has the same kind (string or int) as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code