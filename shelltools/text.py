"""Searching, comparing and bounded copying of strings."""

from __future__ import annotations

NUL = "\0"


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    if _single(char) == NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    if _single(char) == NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters, stopping at the end of either string.

    Returns the code-point difference at the first mismatch, the end of a
    string counting as code point 0, or 0 when no mismatch is found.
    """
    _non_negative("count", count)
    for index in range(count):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the copied text and the full length of ``src``; a size of 0
    copies nothing.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length the full result would have
    had. When ``size`` does not exceed ``len(dst)`` nothing is appended and
    the returned length is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)