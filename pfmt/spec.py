"""Parsing of a single conversion specification of a format string."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pfmt.chars import atoi
from pfmt.numconv import to_signed

__all__ = ["Spec", "parse_spec", "LENGTH_BITS", "CONVERSIONS"]

CONVERSIONS = "cspdiuxX%"

# Bit width of the integer argument for each length-modifier count
# ('l' adds 1, 'h' adds 3); any other count reads a plain 32-bit int.
LENGTH_BITS = {1: 64, 2: 64, 3: 16, 6: 8}

_FLAG_CHARS = "-0#' +"
_WIDTH_STOP = CONVERSIONS + "lh."
_PRECISION_STOP = CONVERSIONS + "lh"
_UNSET = -1


@dataclass(frozen=True)
class Spec:
    """One parsed conversion: flags, field width, precision, length and type."""

    conversion: str
    minus: bool = False
    zero: bool = False
    hash: bool = False
    apostrophe: bool = False
    space: bool = False
    plus: bool = False
    width: int | None = None
    precision: int | None = None
    length: int = 0


def _incomplete(fmt: str) -> ValueError:
    return ValueError(f"incomplete conversion specification in {fmt!r}")


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for '*' in format") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'*' needs an int argument, got {type(value).__name__}")
    return to_signed(value, 32)


def _optional(value: int) -> int | None:
    return None if value == _UNSET else value


def _skip_until(fmt: str, pos: int, stops: str) -> int:
    while pos < len(fmt) and fmt[pos] not in stops:
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[Spec, int]:
    """Parse the specification starting at ``pos``, just after a '%'.

    Arguments taken by '*' width or precision are drawn from the iterator
    ``args``. Returns the spec and the position after its conversion
    character. Characters that are not part of the syntax are skipped.
    """
    end = len(fmt)
    if not 0 <= pos < end:
        raise _incomplete(fmt)

    flags = dict.fromkeys(("minus", "zero", "hash", "apostrophe", "space", "plus"), False)
    names = dict(zip(_FLAG_CHARS, ("minus", "zero", "hash", "apostrophe", "space", "plus")))
    while pos < end and fmt[pos] in _FLAG_CHARS:
        flags[names[fmt[pos]]] = True
        pos += 1
    if pos >= end:
        raise _incomplete(fmt)

    width: int | None = None
    if fmt[pos] == "*":
        value = _next_int(args)
        if value < 0:
            flags["minus"] = True
            width = to_signed(-value, 32)
        else:
            width = value
    elif fmt[pos] not in CONVERSIONS + ".":
        width = _optional(atoi(fmt[pos:]))
    pos = _skip_until(fmt, pos, _WIDTH_STOP)

    precision: int | None = None
    if pos < end and fmt[pos] == ".":
        pos += 1
        if pos < end and fmt[pos] == "*":
            value = _next_int(args)
            precision = None if value < 0 else value
        elif pos >= end or fmt[pos] in CONVERSIONS:
            precision = 0
        else:
            precision = _optional(atoi(fmt[pos:]))
    pos = _skip_until(fmt, pos, _PRECISION_STOP)

    if flags["zero"] and flags["minus"]:
        flags["zero"] = False

    length = 0
    while pos < end and fmt[pos] in "lh":
        length += 1 if fmt[pos] == "l" else 3
        pos += 1
    if pos >= end:
        raise _incomplete(fmt)

    spec = Spec(
        conversion=fmt[pos],
        width=width,
        precision=precision,
        length=length,
        **flags,
    )
    return spec, pos + 1