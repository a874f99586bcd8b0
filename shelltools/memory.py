"""Byte-buffer operations on bytearrays and other bytes-like objects."""

from __future__ import annotations


def _check_range(length: int, offset: int, count: int) -> None:
    if offset < 0 or count < 0 or offset + count > length:
        raise ValueError(
            f"range [{offset}, {offset + count}) outside buffer of length {length}"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (mod 256)."""
    _check_range(len(buffer), 0, count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes from offset ``src`` to offset ``dest``, front to back.

    When the destination starts inside the source range, bytes already
    written are read again, so the start of the source repeats.
    """
    _check_range(len(buffer), src, count)
    _check_range(len(buffer), dest, count)
    if dest == src or count == 0:
        return buffer
    if src < dest < src + count:
        period = buffer[src:dest]
        repeats = -(-count // len(period))
        buffer[dest:dest + count] = (period * repeats)[:count]
    else:
        buffer[dest:dest + count] = buffer[src:src + count]
    return buffer


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to ``dest``; overlapping ranges are safe."""
    _check_range(len(buffer), src, count)
    _check_range(len(buffer), dest, count)
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Offset of the first byte equal to ``value`` (mod 256) in ``data[:count]``."""
    _check_range(len(data), 0, count)
    index = bytes(data[:count]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Difference of the first differing byte in the first ``count`` bytes, else 0."""
    _check_range(len(first), 0, count)
    _check_range(len(second), 0, count)
    return next(
        (a - b for a, b in zip(first[:count], second[:count]) if a != b),
        0,
    )


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)