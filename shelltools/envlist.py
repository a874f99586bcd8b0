"""Helpers for the shell's list of environment entries."""

from __future__ import annotations

from collections.abc import Sequence


def render_entries(entries: Sequence[str] | None) -> str:
    """One entry per line followed by a ``(NULL)`` marker; empty input gives ""."""
    if not entries:
        return ""
    return "".join(f"{entry}\n" for entry in entries) + "(NULL)\n"


def append_entry(entries: Sequence[str] | None, text: str) -> list[str]:
    """A new list holding ``entries`` followed by ``text``."""
    return [*(entries or ()), text]