"""Formatting of whole format strings and writing them to standard output."""

from __future__ import annotations

import sys
from typing import Any

from pfmt.convert import render
from pfmt.spec import parse_spec

__all__ = ["format", "printf"]

_PERCENT = "%"


def format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with every conversion specification replaced by its rendering.

    Literal text is copied unchanged. Arguments are consumed left to right,
    including those taken by '*' widths and precisions; surplus arguments
    are ignored. Missing arguments, bad argument types and incomplete
    specifications raise ``ValueError`` or ``TypeError``.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    arg_iter = iter(args)
    parts: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find(_PERCENT, pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1, arg_iter)
        parts.append(render(spec, arg_iter))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Nothing is written when formatting fails; the error propagates instead.
    """
    text = format(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)