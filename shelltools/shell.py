"""An interactive shell loop that reads command lines and runs the built-ins."""

from __future__ import annotations

import contextlib
import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from shelltools.builtins import ShellState, Token, handle
from shelltools.compose import split

PROMPT_SUFFIX = "$> "

_BANNER = (
    "▖  ▖▄▖▖ ▖▄▖▄▖▖▖▄▖▖ ▖ \n"
    "▛▖▞▌▐ ▛▖▌▐ ▚ ▙▌▙▖▌ ▌ \n"
    "▌▝ ▌▟▖▌▝▌▟▖▄▌▌▌▙▖▙▖▙▖\n\n"
)


def banner() -> str:
    """The banner shown when the shell starts."""
    return _BANNER


def build_prompt(suffix: str = PROMPT_SUFFIX) -> str:
    """The current working directory followed by ``suffix``.

    Raises OSError when the working directory cannot be determined.
    """
    return os.getcwd() + suffix


def _default_input() -> Callable[[str], str | None]:
    try:
        import readline  # noqa: F401  (enables line editing for input())
    except ImportError:
        pass
    return input


class Shell:
    """Reads lines with ``input_func`` and writes its own messages to ``output``.

    ``input_func`` is called with the prompt and returns the line read; it
    signals end of input by returning None or raising EOFError.
    """

    def __init__(
        self,
        input_func: Callable[[str], str | None] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._use_readline_history = input_func is None
        self.input_func = input_func if input_func is not None else _default_input()
        self.output = output if output is not None else sys.stdout
        self.state = ShellState()
        self.history: list[str] = []

    def _add_history(self, line: str) -> None:
        self.history.append(line)
        if self._use_readline_history:
            try:
                import readline
            except ImportError:
                return
            readline.add_history(line)

    def _clear_history(self) -> None:
        self.history.clear()
        if self._use_readline_history:
            try:
                import readline
            except ImportError:
                return
            readline.clear_history()

    def run_line(self, line: str) -> Token | None:
        """Run one command line and return the built-in it named, if any."""
        if line:
            self._add_history(line)
        self.state.line = line
        self.state.argv = split(line, " ")
        try:
            with contextlib.redirect_stdout(self.output):
                return handle(self.state, self.state.argv)
        finally:
            self.state.argv = []
            self.state.line = ""

    def _read(self, prompt: str) -> str | None:
        try:
            return self.input_func(prompt)
        except EOFError:
            return None

    def run(self) -> int:
        """Read and run lines until end of input; returns the exit status."""
        self.output.write(banner())
        self.output.write(f"Pid : {os.getpid()}\n")
        self.output.flush()
        while True:
            try:
                self.state.pwd = build_prompt(PROMPT_SUFFIX)
            except OSError as exc:
                self.state.pwd = None
                print(f"(pwd error)$> : {exc.strerror or exc}", file=sys.stderr)
                break
            line = self._read(self.state.pwd)
            if line is None:
                self.output.write("exit\n")
                self.output.flush()
                self.state = ShellState()
                break
            self.run_line(line)
        self._clear_history()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive shell on standard input and output."""
    return Shell().run()


if __name__ == "__main__":
    sys.exit(main())