"""printf-style formatting with C semantics, plus small text helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "textops", "numconv", "spec", "convert", "printf"]