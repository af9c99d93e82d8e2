"""Line-wrapping and truncation policy for summary text.

Summaries are wrapped at a fixed column width; anything beyond the line cap
is cut and flagged so the renderer can append a ``(truncated)`` marker.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

WRAP_WIDTH = 160
MAX_LINES = 20
TRUNCATED_MARKER = " (truncated)"


@dataclass(frozen=True)
class PresentedSummary:
    """Wrapped summary lines plus whether the tail was cut."""

    lines: tuple[str, ...]
    truncated: bool = False

    def display_lines(self) -> list[str]:
        """Return lines with the truncation marker appended when needed."""
        out = list(self.lines)
        if self.truncated:
            out.append(TRUNCATED_MARKER)
        return out


def present_summary(text: str, width: int = WRAP_WIDTH, max_lines: int = MAX_LINES) -> PresentedSummary:
    """Wrap ``text`` to ``width`` columns and keep at most ``max_lines`` lines."""
    lines = textwrap.wrap(text.strip(), width=max(1, width))
    if max_lines > 0 and len(lines) > max_lines:
        return PresentedSummary(lines=tuple(lines[:max_lines]), truncated=True)
    return PresentedSummary(lines=tuple(lines))
