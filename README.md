# shelltools

A small interactive shell, a runner for two-command pipelines, and the string,
memory, line-reading and linked-list helpers they are built on. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
pip install ".[test]"   # with pytest for the test suite
```

## Commands

### `shelltools-shell`

```
shelltools-shell
```

Prints a banner and the process id, then shows a prompt made of the current
directory followed by `$> `. Each line is split on spaces and its first word
is matched against the built-in names `echo`, `cd`, `pwd`, `export`, `env`
and `exit` (a word matches when it starts with one of these names).

- `echo` runs the `echo` program found in the first `PATH` entry that starts
  with `/usr/bin`, with an empty environment. Its first argument has a
  leading and a trailing double quote removed and backslash escapes dropped.
- `export NAME=value` checks the assignment, appends it to the shell's own
  list of entries and prints that list, one entry per line, ending with
  `(NULL)`. A bare `NAME` is stored as is and `NAME=` is stored as `NAME=""`.
- Any word that matches no built-in prints `bash: <word>: command not found`.

End of input (Ctrl-D) prints `exit` and leaves the shell with status 0.

### `shelltools-pipex`

```
shelltools-pipex infile "grep foo" "wc -l" outfile
```

Runs `cmd1 < infile | cmd2 > outfile`. Each command is split on spaces and
looked up on `PATH`; a command containing `/` is used as given. The exit
status is that of the second command. An empty or unknown command gives
status 127. If the input file cannot be opened, an error is reported, the
first command is skipped and the second reads empty input. If the output file
cannot be opened, the error is reported and the status is 1. With the wrong
number of arguments it prints `Error: Bad arguments` and a usage line and
exits with status 1.

## What the shell does not do

`cd`, `pwd`, `env` and `exit` are recognised by name but do nothing yet: the
working directory is not changed, no environment is printed and `exit` does
not leave the shell. The shell does not run other programs, and has no pipes,
redirections, quoting rules or variable expansion; for a two-command pipeline
use `shelltools-pipex`.

## Library

- `shelltools.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` (each takes a one-character string or a
  code point), `atoi` (wraps to 32 bits) and `itoa` (raises `OverflowError`
  outside the 32-bit range).
- `shelltools.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc`. `memcpy` and `memmove` copy between offsets of one
  `bytearray`; `memcpy` copies front to back, so an overlapping destination
  repeats the start of the source. Ranges outside the buffer raise
  `ValueError`.
- `shelltools.text`: `strchr`, `strrchr`, `strnstr` (indices or `None`),
  `strncmp`, and `strlcpy` / `strlcat`, which return the resulting text
  together with the length the full result would have had.
- `shelltools.compose`: `substr`, `strjoin`, `strtrim`, `split` (drops empty
  words), `strmapi`, `striteri` (updates a mutable sequence in place).
- `shelltools.linked`: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `shelltools.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a file descriptor.
- `shelltools.line_reader`: `LineReader(fd, buffer_size=300)`, with
  `read_line()` returning the next line (newline kept) or `None`, and
  iteration over lines.
- `shelltools.pipex`: `find_command_path`, `parse_command`, `run_pipeline`,
  `PipexError`, `main`.
- `shelltools.builtins`: `Token`, `ShellState`, `classify`, `find_bin_path`,
  `sanitize_echo_argument`, `check_assignment`, `echo`, `export`, `handle`.
- `shelltools.envlist`: `append_entry`, `render_entries`.
- `shelltools.shell`: `Shell` (takes an input function and an output stream,
  with `run_line` and `run`), `banner`, `build_prompt`, `main`.

```python
from shelltools.compose import split
from shelltools.chars import itoa
from shelltools.text import strlcpy

split("   split    this for   me  !   ", " ")  # ['split', 'this', 'for', 'me', '!']
itoa(-512)                                     # '-512'
strlcpy("fff", 2)                              # ('f', 3)
```