"""Building new strings from existing ones: slicing, joining, trimming, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``, clamped to the text."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(text))
    length = min(length, len(text) - start)
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each element, storing any non-None result in place."""
    for index, char in enumerate(chars):
        result = func(index, char)
        if result is not None:
            chars[index] = result