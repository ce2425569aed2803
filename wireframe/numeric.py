"""Integer parsing and formatting with C ``int``/``long`` semantics."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_HEX_DIGITS = "0123456789abcdef"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse_decimal(text: str | None) -> int:
    if not text:
        return 0
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return value * sign


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer as a 32-bit C ``int``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. ``None`` or text without digits yields 0. Values
    outside the ``int`` range wrap around.
    """
    return _wrap(_parse_decimal(text), 32)


def atol(text: str | None) -> int:
    """Parse a leading decimal integer as a 64-bit C ``long``."""
    return _wrap(_parse_decimal(text), 64)


def atoi_base(text: str | None) -> int:
    """Parse lower-case hexadecimal digits of ``text`` as a 32-bit ``int``.

    Characters that are not lower-case hex digits are skipped rather than
    ending the parse. The result wraps to a signed 32-bit value, so a colour
    such as ``"ff00ffff"`` comes back negative with the same bit pattern.
    """
    if not text:
        return 0
    value = 0
    for ch in text:
        digit = _HEX_DIGITS.find(ch)
        if digit >= 0:
            value = value * 16 + digit
    return _wrap(value, 32)


def itoa(number: int) -> str:
    """Format a 32-bit integer in decimal.

    Raises OverflowError if ``number`` does not fit in a C ``int``.
    """
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)