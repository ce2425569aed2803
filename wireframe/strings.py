"""String searching, slicing and splitting helpers with the usual C-library rules.

Positions are returned as indices into the text (or ``None`` when nothing is
found) rather than as pointers. Asking for the terminator character ``"\\0"``
finds the position just past the end of the text.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(text: str | None, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or ``None``.

    Looking for ``"\\0"`` returns ``len(text)``.
    """
    _check_char(char)
    if text is None:
        return None
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or ``None``.

    Looking for ``"\\0"`` returns ``len(text)``.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0. Returns ``None`` when there is no match.
    """
    _check_size("length", length)
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters, as NUL-terminated strings.

    Returns the difference of the first pair of differing character codes,
    or 0 if the compared prefixes are equal.
    """
    _check_size("count", count)
    for pos in range(count):
        left = ord(first[pos]) if pos < len(first) else 0
        right = ord(second[pos]) if pos < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def substr(text: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end yields an empty string; ``None`` passes through.
    """
    _check_size("start", start)
    _check_size("length", length)
    if text is None:
        return None
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    _check_char(sep)
    return [piece for piece in text.split(sep) if piece]


def count_words(text: str | None, sep: str) -> int:
    """Count the non-empty pieces of ``text`` separated by ``sep``."""
    _check_char(sep)
    if not text:
        return 0
    if sep == _NUL:
        return 1
    return len(split(text, sep))


def strmapi(text: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``func(index, char)`` applied to each character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str] | None,
    func: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``func(index, char)`` on each character of ``text`` in place.

    ``text`` is a mutable sequence of characters, such as ``list("abc")``.
    When ``func`` returns a character it replaces the one it was given.
    """
    if text is None or func is None:
        return
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including its terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``, which tells the caller whether truncation occurred.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation. If ``size`` does not exceed ``len(dst)`` nothing is
    appended and the returned length is ``size + len(src)``.
    """
    _check_size("size", size)
    dst_len = len(dst)
    if size <= dst_len:
        return dst, size + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)