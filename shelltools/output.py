"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from shelltools.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(char: str, fd: int) -> None:
    """Write one character to ``fd``; nothing is written when ``fd`` <= 0."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if fd <= 0:
        return
    _write_all(fd, char.encode())


def put_str(text: str | None, fd: int) -> None:
    """Write ``text`` to ``fd``; nothing is written for None, "" or a negative fd."""
    if fd < 0 or not text:
        return
    _write_all(fd, text.encode())


def put_endl(text: str | None, fd: int) -> None:
    """Write ``text`` and a newline to ``fd``; skipped for None or ``fd`` <= 0."""
    if fd <= 0 or text is None:
        return
    _write_all(fd, (text + "\n").encode())


def put_nbr(number: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal; skipped when ``fd`` <= 0."""
    text = itoa(number)
    if fd <= 0:
        return
    _write_all(fd, text.encode())