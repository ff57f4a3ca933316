"""Integer-to-text conversion in arbitrary bases and fixed-width integer wrapping."""

from __future__ import annotations

__all__ = [
    "itoa_base",
    "utoa_base",
    "int_length",
    "separator_count",
    "to_signed",
    "to_unsigned",
]

_DIGITS = "0123456789abcdef"


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an int, got {type(base).__name__}")
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")


def _check_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")


def _digits(magnitude: int, base: int) -> str:
    if magnitude == 0:
        return _DIGITS[0]
    out: list[str] = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        out.append(_DIGITS[remainder])
    return "".join(reversed(out))


def itoa_base(value: int, base: int) -> str:
    """Return ``value`` written in ``base`` with lower-case digits.

    Only base 10 carries a minus sign; in any other base a negative value is
    written as the digits of its magnitude.
    """
    _check_int(value)
    _check_base(base)
    text = _digits(abs(value), base)
    if value < 0 and base == 10:
        return "-" + text
    return text


def utoa_base(value: int, base: int) -> str:
    """Return the non-negative ``value`` written in ``base`` with lower-case digits."""
    _check_int(value)
    _check_base(base)
    if value < 0:
        raise ValueError(f"expected a non-negative value, got {value}")
    return _digits(value, base)


def int_length(n: int) -> int:
    """Return the number of decimal digits in the magnitude of ``n`` (1 for zero)."""
    _check_int(n)
    return len(_digits(abs(n), 10))


def separator_count(n: int) -> int:
    """Return how many thousands separators the decimal magnitude of ``n`` takes."""
    return (int_length(n) - 1) // 3


def _check_bits(bits: int) -> None:
    _check_int(bits)
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")


def to_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    _check_int(value)
    _check_bits(bits)
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def to_unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` to an unsigned integer of ``bits`` bits."""
    _check_int(value)
    _check_bits(bits)
    return value % (1 << bits)