"""Runtime composition layer for layerview.

Builds the navigator and viewer state, restores the saved session depth, and
runs the interactive loop. Falls back to plain summaries when not on a tty.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys

from .config import load_session, load_theme_name, save_session, save_theme_name
from .input import read_key
from .keys import build_viewer_key_registry, handle_key
from .model import Batch
from .navigation import Navigator
from .presentation import MAX_LINES, WRAP_WIDTH
from .render import render_frame, render_plain_summaries
from .state import ViewerState
from .terminal import TerminalController
from .ui_theme import normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)

IDLE_TIMEOUT_MS = 250


def build_navigator(batch: Batch, depth: int | None = None, repeated_types_only: bool = False) -> Navigator:
    """Load ``batch`` into a navigator, starting at ``depth`` or the saved session depth.

    Raises ``MalformedInputError`` for rejected batches.
    """
    if depth is None:
        session = load_session()
        depth = session.depth if session is not None else None
    navigator = Navigator(repeated_types_only=repeated_types_only)
    navigator.load(batch, depth=depth)
    return navigator


def run_main_loop(
    state: ViewerState,
    terminal: TerminalController,
    stdin_fd: int,
    style: str,
    no_color: bool,
    theme_name: str | None,
) -> None:
    """Repaint on change and dispatch keys until a quit binding fires."""
    theme = resolve_theme(theme_name, no_color=no_color)
    registry = build_viewer_key_registry(state)
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while not state.should_quit:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True
            if state.dirty:
                terminal.write(render_frame(state, theme, term.columns, term.lines, style=style, no_color=no_color))
                state.dirty = False
            key = read_key(stdin_fd, timeout_ms=IDLE_TIMEOUT_MS)
            handle_key(state, registry, key)


def run_viewer(
    batch: Batch,
    title: str,
    *,
    depth: int | None = None,
    style: str = "monokai",
    no_color: bool = False,
    nopager: bool = False,
    theme_name: str | None = None,
    repeated_types_only: bool = False,
    wrap_width: int = WRAP_WIDTH,
    max_lines: int = MAX_LINES,
) -> None:
    """Initialize viewer state for ``batch`` and run it interactively or print it."""
    navigator = build_navigator(batch, depth=depth, repeated_types_only=repeated_types_only)
    state = ViewerState(
        navigator=navigator,
        title=title,
        wrap_width=wrap_width,
        max_summary_lines=max_lines,
    )

    if nopager or not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stdout.fileno()):
        sys.stdout.write(render_plain_summaries(state, wrap_width))
        return

    if theme_name is None:
        theme_name = load_theme_name()
    else:
        save_theme_name(normalize_theme_name(theme_name))
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    try:
        run_main_loop(state, terminal, sys.stdin.fileno(), style, no_color, theme_name)
    finally:
        save_session(navigator.snapshot())
        logger.debug("saved session depth %d", navigator.current_depth())
