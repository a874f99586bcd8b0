"""Recognition and handling of the shell's built-in commands."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from shelltools.compose import split
from shelltools.envlist import append_entry, render_entries

BIN_DIRECTORY = "/usr/bin"


class Token(IntEnum):
    """The built-in commands the shell knows."""

    ECHO = 0
    CD = 1
    PWD = 2
    EXPORT = 3
    ENV = 4
    EXIT = 5


_PREFIXES = (
    ("echo", Token.ECHO),
    ("cd", Token.CD),
    ("pwd", Token.PWD),
    ("export", Token.EXPORT),
    ("env", Token.ENV),
    ("exit", Token.EXIT),
)


@dataclass
class ShellState:
    """What the shell carries from one command line to the next."""

    argv: list[str] = field(default_factory=list)
    env: list[str] = field(default_factory=list)
    line: str = ""
    pwd: str | None = None


def classify(word: str | None) -> Token | None:
    """The built-in whose name ``word`` starts with, or None."""
    if word is None:
        return None
    for prefix, token in _PREFIXES:
        if word.startswith(prefix):
            return token
    return None


def find_bin_path(command: str, path_value: str | None) -> str | None:
    """``command`` inside the first PATH entry starting with ``/usr/bin``."""
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        if directory.startswith(BIN_DIRECTORY):
            return f"{directory}/{command}"
    return None


def sanitize_echo_argument(argument: str) -> str:
    """Drop a leading and a trailing double quote and remove backslash escapes."""
    size = len(argument)
    out: list[str] = []
    index = 0
    while index < size:
        if argument[index] == '"' and index in (0, size - 1):
            index += 1
        if index < size and argument[index] == "\\":
            index += 1
        if index >= size:
            break
        out.append(argument[index])
        index += 1
    return "".join(out)


def _is_name_start(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_name_char(char: str) -> bool:
    return _is_name_start(char) or "0" <= char <= "9"


def check_assignment(state: ShellState, text: str) -> bool:
    """Validate a ``NAME=value`` assignment, normalising ``state.line``.

    Returns True for a valid assignment, storing it in ``state.line``. A
    bare name is stored as is and an empty value as ``NAME=""``; both
    return False. Invalid names or values leave ``state.line`` unchanged.
    """
    if not text or not _is_name_start(text[0]):
        return False
    index = 1
    while index < len(text) and text[index] != "=":
        if not _is_name_char(text[index]):
            return False
        index += 1
    if index >= len(text):
        state.line = text
        return False
    index += 1
    if index >= len(text) or text[index] == " ":
        state.line = text[:index] + '""'
        return False
    quotes = 0
    for position in range(index, len(text)):
        char = text[position]
        if char == '"':
            quotes += 1
        is_last = position == len(text) - 1
        if not (33 <= ord(char) <= 126) or (is_last and quotes % 2 != 0):
            return False
    state.line = text
    return True


def echo(argv: Sequence[str], path: str | None) -> int:
    """Run the echo program at ``path`` with its first argument sanitised.

    Returns the program's exit status, or 127 when it cannot be run.
    """
    args = list(argv)
    if len(args) > 1:
        args[1] = sanitize_echo_argument(args[1])
    if path is None:
        return 127
    try:
        return subprocess.run(args, executable=path, env={}).returncode
    except OSError:
        return 127


def _argument_text(line: str) -> str:
    """The part of ``line`` after its first word and the spaces following it."""
    index = 0
    while index < len(line) and line[index] != " ":
        index += 1
    while index < len(line) and line[index] == " ":
        index += 1
    return line[index:]


def export(state: ShellState) -> bool:
    """Add the assignment in ``state.line`` to ``state.env`` and print the list."""
    valid = check_assignment(state, _argument_text(state.line))
    state.env = append_entry(state.env, state.line)
    print(render_entries(state.env), end="")
    return valid


def handle(state: ShellState, argv: Sequence[str]) -> Token | None:
    """Dispatch ``argv`` to its built-in; unknown commands are reported."""
    if not argv:
        return None
    token = classify(argv[0])
    if token is None:
        print(f"bash: {argv[0]}: command not found")
        return None
    path = find_bin_path(argv[0], os.environ.get("PATH"))
    if token is Token.ECHO:
        echo(argv, path)
    elif token is Token.EXPORT:
        export(state)
    return token