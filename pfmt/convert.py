"""Rendering of single conversions: characters, strings, integers and pointers."""

from __future__ import annotations

import locale
from collections.abc import Callable, Iterator
from typing import Any

from pfmt.numconv import int_length, separator_count, to_signed, to_unsigned, utoa_base
from pfmt.spec import LENGTH_BITS, Spec

__all__ = [
    "format_char",
    "format_string",
    "format_signed",
    "format_unsigned",
    "format_hex",
    "format_pointer",
    "render",
]

_DEFAULT_BITS = 32
_POINTER_BITS = 64
_LONG_LONG_MIN = -(1 << 63)
_NULL_TEXT = "(null)"
_HEX_PREFIX = "0x"


def _check_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _bits(spec: Spec) -> int:
    return LENGTH_BITS.get(spec.length, _DEFAULT_BITS)


def _thousands_separator() -> str:
    return locale.localeconv()["thousands_sep"][:1]


def _group(digits: str, count: int, sep: str) -> str:
    """Insert ``count`` separators between groups of three, counted from the right."""
    if not sep or count <= 0:
        return digits
    cut = len(digits) - 3 * count
    parts = [digits[:cut]] + [digits[k:k + 3] for k in range(cut, len(digits), 3)]
    return sep.join(parts)


def _precision_pad(spec: Spec, numlen: int) -> int:
    precision = spec.precision
    if precision is not None and precision >= numlen:
        return precision - numlen
    return 0


def _width_pad(spec: Spec, field: int) -> int:
    if spec.width is not None and spec.width >= field:
        return spec.width - field
    return 0


def _format_decimal(spec: Spec, value: int, *, unsigned: bool) -> str:
    suppressed = spec.precision == 0 and value == 0

    if unsigned or spec.plus:
        sign = "-" if value < 0 and not unsigned else "+"
    elif value < 0:
        sign = "-"
    elif spec.space:
        sign = " "
    else:
        sign = "+"

    groups = 0
    sep = ""
    if spec.apostrophe:
        basis = to_signed(value, 64) if unsigned else value
        groups = 0 if basis == _LONG_LONG_MIN else separator_count(basis)
        sep = _thousands_separator()

    numlen = (0 if suppressed else int_length(value)) + groups
    prec_pad = _precision_pad(spec, numlen)
    counts_sign = sign == "-" or (sign == "+" and spec.plus) or spec.space
    field = numlen + prec_pad + (1 if counts_sign else 0)
    width_pad = _width_pad(spec, field)

    shows_sign = not unsigned and (sign == "-" or spec.plus or spec.space)
    shown_sign = sign if shows_sign else ""
    body = "" if suppressed else _group(str(abs(value)), groups, sep)
    number = "0" * prec_pad + body
    # Zero padding applies only with the zero flag and no precision.
    fill = "0" if spec.zero and spec.precision is None else " "

    if spec.minus:
        text = shown_sign + number
        # Padding is lost when the digits fall short of the planned field.
        return text + " " * width_pad if len(text) == field else text
    if shown_sign and fill == "0":
        return shown_sign + fill * width_pad + number
    return fill * width_pad + shown_sign + number


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(to_unsigned(value, 8))
    raise TypeError(f"expected a character or an int, got {type(value).__name__}")


def format_char(spec: Spec, value: Any = None) -> str:
    """Render a 'c' conversion, or a literal '%' for the '%' conversion."""
    char = "%" if spec.conversion == "%" else _as_char(value)
    pad = ""
    if spec.width is not None and spec.width > 0:
        pad = ("0" if spec.zero else " ") * (spec.width - 1)
    return char + pad if spec.minus else pad + char


def format_string(spec: Spec, value: str | None) -> str:
    """Render an 's' conversion; None is shown as "(null)"."""
    if value is None:
        text = _NULL_TEXT
    elif isinstance(value, str):
        text = value.split("\0", 1)[0]
    else:
        raise TypeError(f"expected a str or None, got {type(value).__name__}")
    if spec.precision is not None:
        text = text[:max(spec.precision, 0)]
    pad = ""
    if spec.width is not None and spec.width >= len(text):
        pad = " " * (spec.width - len(text))
    return text + pad if spec.minus else pad + text


def format_signed(spec: Spec, value: int) -> str:
    """Render a 'd' or 'i' conversion, wrapping to the length modifier's width."""
    return _format_decimal(spec, to_signed(_check_int(value), _bits(spec)), unsigned=False)


def format_unsigned(spec: Spec, value: int) -> str:
    """Render a 'u' conversion, wrapping to the length modifier's width."""
    return _format_decimal(spec, to_unsigned(_check_int(value), _bits(spec)), unsigned=True)


def format_hex(spec: Spec, value: int) -> str:
    """Render an 'x' or 'X' conversion, wrapping to the length modifier's width."""
    value = to_unsigned(_check_int(value), _bits(spec))
    digits = utoa_base(value, 16)
    prefix = _HEX_PREFIX if spec.hash and value != 0 else ""
    suppressed = spec.precision == 0 and value == 0

    numlen = 0 if suppressed else len(digits)
    prec_pad = _precision_pad(spec, numlen)
    width_pad = _width_pad(spec, numlen + prec_pad)
    if prefix:
        width_pad = max(0, width_pad - len(prefix))

    number = "0" * prec_pad + ("" if suppressed else digits)
    fill = "0" if spec.zero and spec.precision is None else " "
    if spec.minus:
        text = prefix + number + " " * width_pad
    elif prefix and fill == "0":
        text = prefix + fill * width_pad + number
    else:
        text = fill * width_pad + prefix + number
    return text.upper() if spec.conversion == "X" else text


def format_pointer(spec: Spec, value: int | None) -> str:
    """Render a 'p' conversion as "0x" and lower-case hex digits; None is address 0."""
    address = 0 if value is None else to_unsigned(_check_int(value), _POINTER_BITS)
    digits = utoa_base(address, 16)
    width_pad = 0
    if spec.width is not None:
        width_pad = max(0, spec.width - len(digits) - len(_HEX_PREFIX))
    number = _HEX_PREFIX + ("" if spec.precision == 0 else digits)
    return number + " " * width_pad if spec.minus else " " * width_pad + number


_HANDLERS: dict[str, Callable[[Spec, Any], str]] = {
    "c": format_char,
    "s": format_string,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": format_hex,
    "X": format_hex,
    "p": format_pointer,
}


def render(spec: Spec, args: Iterator[Any]) -> str:
    """Render ``spec``, drawing its argument (if it takes one) from the iterator ``args``."""
    if spec.conversion == "%":
        return format_char(spec)
    handler = _HANDLERS.get(spec.conversion)
    if handler is None:
        raise ValueError(f"unknown conversion {spec.conversion!r}")
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(
            f"not enough arguments for conversion {spec.conversion!r}"
        ) from None
    return handler(spec, value)