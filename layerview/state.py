"""Mutable UI state for one interactive viewer session."""

from __future__ import annotations

from dataclasses import dataclass

from .navigation import Navigator


@dataclass
class ViewerState:
    navigator: Navigator
    title: str
    wrap_width: int
    max_summary_lines: int
    list_start: int = 0
    list_level: tuple[int, tuple[str, ...]] | None = None
    show_help: bool = False
    inspector_open: bool = False
    dirty: bool = True
    should_quit: bool = False
