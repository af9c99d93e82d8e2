"""ANSI-aware text measurement and clipping.

Keeps rendered rows aligned when color codes and wide characters are present.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal columns used by ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def _tokens(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, chunk)`` pairs; plain chunks are single characters."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        yield from ((False, ch) for ch in text[pos : match.start()])
        yield True, match.group(0)
        pos = match.end()
    yield from ((False, ch) for ch in text[pos:])


def display_width(text: str) -> int:
    """Return rendered width of ``text`` ignoring ANSI escape sequences."""
    col = 0
    for is_escape, chunk in _tokens(text):
        if not is_escape:
            col += char_display_width(chunk, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences before the cut are kept verbatim; tabs become spaces.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, chunk in _tokens(text):
        if is_escape:
            out.append(chunk)
            continue
        width = char_display_width(chunk, col)
        if col + width > max_cols:
            break
        out.append(" " * width if chunk == "\t" else chunk)
        col += width
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad it with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
