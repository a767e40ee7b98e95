"""ASCII character classification."""

from __future__ import annotations

_SPACES = frozenset(map(ord, " \f\n\r\t\v"))


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else c


def isdigit(c: int | str) -> bool:
    """True for the ASCII decimal digits."""
    c = _code(c)
    return ord("0") <= c <= ord("9")


def isalpha(c: int | str) -> bool:
    """True for the ASCII letters."""
    c = _code(c)
    return ord("a") <= c <= ord("z") or ord("A") <= c <= ord("Z")


def isspace(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return and the two tabs."""
    return _code(c) in _SPACES