"""Character classification and case conversion on ASCII code points."""

from __future__ import annotations

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def is_alpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return _is_upper(code) or _is_lower(code)


def is_digit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return _DIGIT_0 <= code <= _DIGIT_9


def is_alnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Map a lower-case ASCII letter to upper case; other codes are unchanged."""
    return code - _CASE_OFFSET if _is_lower(code) else code


def to_lower(code: int) -> int:
    """Map an upper-case ASCII letter to lower case; other codes are unchanged."""
    return code + _CASE_OFFSET if _is_upper(code) else code


def str_lower(text: str | None) -> str | None:
    """Lower-case the ASCII letters of ``text``, leaving every other character alone.

    ``None`` is passed through unchanged.
    """
    if text is None:
        return None
    return "".join(chr(to_lower(ord(ch))) for ch in text)