"""Run two commands joined by a pipe between an input file and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from shelltools.compose import split

USAGE = "Usage: pipex <file1> <cmd1> <cmd2> <file2>"
COMMAND_NOT_FOUND = 127


class PipexError(Exception):
    """Raised when the pipeline cannot be set up."""


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def find_command_path(command: str, env: Mapping[str, str]) -> str | None:
    """Locate ``command`` in the directories of ``env['PATH']``.

    A command containing a slash is returned unchanged. Returns None when
    there is no PATH or no directory holds the command.
    """
    if "/" in command or command.startswith("./"):
        return command
    path_value = env.get("PATH")
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def parse_command(text: str) -> list[str]:
    """Split a command line on spaces, dropping empty words."""
    return split(text, " ")


def _spawn(
    argv: Sequence[str], env: Mapping[str, str], stdin, stdout
) -> subprocess.Popen | int:
    """Start a command, or return the exit status it would have failed with."""
    if not argv or not argv[0]:
        _report("Error: Command is empty")
        return COMMAND_NOT_FOUND
    path = find_command_path(argv[0], env)
    if path is None:
        _report(f"Error: finding command path: {argv[0]}")
        return COMMAND_NOT_FOUND
    try:
        return subprocess.Popen(
            list(argv), executable=path, env=dict(env), stdin=stdin, stdout=stdout
        )
    except OSError as exc:
        _report(f"execve error: {exc.strerror}")
        return 1


def _wait(result: subprocess.Popen | int | None) -> int:
    if result is None:
        return 1
    if isinstance(result, int):
        return result
    return result.wait()


def run_pipeline(
    input_file: str | os.PathLike,
    first: str,
    second: str,
    output_file: str | os.PathLike,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``first < input_file | second > output_file``.

    Returns the exit status of the second command. If the input file
    cannot be opened the first command is skipped and the second reads
    empty input. Raises PipexError when the output file cannot be opened.
    """
    environ = dict(os.environ if env is None else env)
    read_end, write_end = os.pipe()
    first_result: subprocess.Popen | int | None = None
    try:
        try:
            infile = open(input_file, "rb")
        except OSError as exc:
            _report(f"error: {exc.strerror}")
        else:
            with infile:
                first_result = _spawn(parse_command(first), environ, infile, write_end)
    finally:
        os.close(write_end)

    try:
        try:
            out_fd = os.open(
                output_file, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o666
            )
        except OSError as exc:
            raise PipexError(f"error: {exc.strerror}") from exc
        try:
            second_result = _spawn(parse_command(second), environ, read_end, out_fd)
        finally:
            os.close(out_fd)
    finally:
        os.close(read_end)
        _wait(first_result)
    return _wait(second_result)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report("Error: Bad arguments")
        print(USAGE)
        return 1
    try:
        return run_pipeline(args[0], args[1], args[2], args[3])
    except PipexError as exc:
        _report(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())