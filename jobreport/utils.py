"""Small text helpers shared by the terminal layer and the job report."""

from __future__ import annotations

from typing import Any


def pad_zeros(value: int, width: int) -> str:
    """Return ``value`` as a decimal string left-padded with zeros to ``width``."""

    return f"{int(value):0{width}d}"


def indent(text: str, width: int) -> str:
    """Prefix every non-blank line of ``text`` with ``width`` spaces."""

    prefix = " " * width
    return "".join(
        prefix + line if line.strip() else line
        for line in text.splitlines(keepends=True)
    )


def should_use_color(stream: Any) -> bool:
    """Return True when ``stream`` is an interactive terminal."""

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed file
        return False
