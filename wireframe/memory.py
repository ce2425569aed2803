"""Byte-buffer helpers with the usual C-library rules.

Buffers are ``bytearray`` objects (or any mutable byte sequence). Functions
that fill or copy operate in place and return the buffer they changed.
Positions come back as indices, or ``None`` when nothing is found.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer of length {len(buffer)}"
            )


def memset(buffer: MutableSequence[int], value: int, count: int) -> MutableSequence[int]:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` truncated to a byte."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: MutableSequence[int] | None, count: int) -> MutableSequence[int] | None:
    """Zero the first ``count`` bytes of ``buffer``; ``None`` passes through."""
    if buffer is None:
        return None
    return memset(buffer, 0, count)


def memcpy(
    dest: MutableSequence[int] | None,
    src: Sequence[int] | None,
    count: int,
) -> MutableSequence[int] | None:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``.

    When both buffers are ``None`` nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    buffer: MutableSequence[int], dest: int, src: int, count: int
) -> MutableSequence[int]:
    """Move ``count`` bytes at offset ``src`` to offset ``dest`` in one buffer.

    The two regions may overlap; the bytes are copied as if through a
    temporary buffer.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if max(dest, src) + count > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``count`` bytes."""
    _check_count(count, data)
    target = value & 0xFF
    for index, byte in enumerate(data[:count]):
        if byte == target:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare ``count`` bytes and return the difference of the first unequal pair.

    Returns 0 when the compared bytes are identical or ``count`` is 0.
    """
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when ``count * size`` would not fit in a ``size_t``.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} overflows the allocation size")
    return bytearray(count * size)