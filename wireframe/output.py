"""Writing characters, strings and numbers to text streams, and a small printf."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

from .numeric import itoa

_NULL_TEXT = "(null)"
_UINT_MODULUS = 1 << 32
_POINTER_MODULUS = 1 << 64


class FormatError(ValueError):
    """Raised when a printf format string cannot be rendered."""


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: TextIO | None) -> int:
    _target(stream).write(text)
    return len(text)


def put_char(char: str, stream: TextIO | None = None) -> int:
    """Write a single character and return the number of characters written."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _write(char, stream)


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text``, or ``(null)`` for ``None``, and return its length."""
    return _write(_NULL_TEXT if text is None else text, stream)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` followed by a newline and return the characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(number: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit integer in decimal.

    Raises OverflowError if ``number`` does not fit in a C ``int``.
    """
    return _write(itoa(number), stream)


def _to_int32(value: Any) -> int:
    value = operator.index(value) % _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _UINT_MODULUS >> 1 else value


def format_unsigned(value: int) -> str:
    """Render ``value`` as a C ``unsigned int`` in decimal."""
    return str(operator.index(value) % _UINT_MODULUS)


def format_hex(value: int, upper: bool = False) -> str:
    """Render ``value`` as a C ``unsigned int`` in hexadecimal, without prefix."""
    return format(operator.index(value) % _UINT_MODULUS, "X" if upper else "x")


def format_pointer(address: int) -> str:
    """Render a 64-bit address as ``0x`` followed by lower-case hex digits."""
    return "0x" + format(operator.index(address) % _POINTER_MODULUS, "x")


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise FormatError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _format_str(arg: Any) -> str:
    return _NULL_TEXT if arg is None else str(arg)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _format_str,
    "c": _format_char,
    "d": lambda arg: itoa(_to_int32(arg)),
    "i": lambda arg: itoa(_to_int32(arg)),
    "u": format_unsigned,
    "x": lambda arg: format_hex(arg, False),
    "X": lambda arg: format_hex(arg, True),
    "p": format_pointer,
}


def printf(fmt: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Render ``fmt`` with ``args`` and write it; return the characters written.

    Supports ``%s %c %d %i %u %x %X %p %%``. An unknown or dangling
    conversion, a missing argument or a ``None`` format raises FormatError
    and nothing is written.
    """
    if fmt is None:
        raise FormatError("no format string")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec) if spec is not None else None
        if convert is None:
            raise FormatError(f"unsupported conversion %{spec or ''}")
        try:
            arg = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        pieces.append(convert(arg))
    return _write("".join(pieces), stream)