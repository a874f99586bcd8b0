"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(char: str | int) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    if isinstance(char, int):
        return char
    raise TypeError(f"expected str or int, got {type(char).__name__}")


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(char) <= 126


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(char, str) else code


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(char, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C ``int`` would hold it.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text with no digits gives 0. Values outside
    the 32-bit range wrap around.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value - INT_MIN) % 2**32 + INT_MIN


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")
    return str(number)