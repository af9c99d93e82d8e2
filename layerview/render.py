"""Frame rendering for the depth-level list view.

Builds complete screen rows from ``ViewerState`` without mutating navigation
state; only the list scroll offset is adjusted so the selection stays visible.
"""

from __future__ import annotations

from .ansi import clip_ansi_line, fit_ansi_line
from .highlight import inspect_node
from .presentation import TRUNCATED_MARKER, PresentedSummary, present_summary
from .state import ViewerState
from .ui_theme import UITheme

HIGHLIGHT_SYMBOL = ">> "
ITEM_PADDING = "   "
HELP_ENTRIES: tuple[tuple[str, str], ...] = (
    ("j/k Up/Down", "next/previous item"),
    ("l/Right/Enter", "go deeper into selected item"),
    ("h/Left", "go up one level"),
    ("g/G Home/End", "first/last item"),
    ("i", "toggle inspector"),
    ("?", "toggle help"),
    ("q/Esc", "quit"),
)


def build_status_line(left_text: str, width: int, right_text: str = "│ ? Help") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _boxed_header(title: str, meta: str, width: int, theme: UITheme) -> list[str]:
    inner = max(0, width - 2)
    label = " Document "
    top_fill = max(0, inner - len(label))
    top = f"{theme.border}┌{label}{'─' * top_fill}┐{theme.reset}"
    content = f"{theme.header_title}{title}{theme.reset}  {theme.header_meta}{meta}{theme.reset}"
    middle = f"{theme.border}│{theme.reset}{fit_ansi_line(content, inner)}{theme.border}│{theme.reset}"
    bottom = f"{theme.border}└{'─' * inner}┘{theme.reset}"
    return [clip_ansi_line(top, width), clip_ansi_line(middle, width), clip_ansi_line(bottom, width)]


def _header_meta(state: ViewerState) -> str:
    navigator = state.navigator
    count = len(navigator.visible_nodes())
    noun = "item" if count == 1 else "items"
    return f"depth {navigator.current_depth()}/{navigator.max_depth()}  {count} {noun}"


def summary_blocks(state: ViewerState, max_cols: int) -> list[PresentedSummary]:
    """Present every visible node's summary wrapped to at most ``max_cols`` columns."""
    navigator = state.navigator
    wrap_width = max(1, min(state.wrap_width, max_cols))
    return [
        present_summary(navigator.summarize(node), wrap_width, state.max_summary_lines)
        for node in navigator.visible_nodes()
    ]


def _block_rows(block: PresentedSummary, selected: bool, theme: UITheme) -> list[str]:
    rows: list[str] = []
    text_style = theme.item_selected if selected else theme.item_text
    prefix = f"{theme.highlight_symbol}{HIGHLIGHT_SYMBOL}{theme.reset}" if selected else ITEM_PADDING
    for line in block.lines or ("",):
        rows.append(f"{prefix}{text_style}{line}{theme.reset}")
    if block.truncated:
        rows.append(f"{prefix}{theme.truncated}{TRUNCATED_MARKER.strip()}{theme.reset}")
    return rows


def scroll_start_for_selection(heights: list[int], selected: int | None, start: int, rows: int) -> int:
    """Return first item index so the selected item is fully visible when possible."""
    if not heights:
        return 0
    start = max(0, min(start, len(heights) - 1))
    if selected is None:
        return start
    if selected < start:
        return selected
    used = sum(heights[start : selected + 1])
    while start < selected and used > rows:
        used -= heights[start]
        start += 1
    return start


def _list_rows(state: ViewerState, width: int, rows: int, theme: UITheme) -> list[str]:
    navigator = state.navigator
    blocks = summary_blocks(state, width - len(HIGHLIGHT_SYMBOL))
    if not blocks:
        return [f"{theme.empty_hint}   (nothing at this level){theme.reset}"]
    level = (navigator.current_depth(), navigator.scope())
    if level != state.list_level:
        # a new level starts scrolled to its first item
        state.list_level = level
        state.list_start = 0
    selected = navigator.selected_index()
    heights = [max(1, len(block.lines)) + (1 if block.truncated else 0) for block in blocks]
    state.list_start = scroll_start_for_selection(heights, selected, state.list_start, rows)
    out: list[str] = []
    for idx in range(state.list_start, len(blocks)):
        out.extend(_block_rows(blocks[idx], idx == selected, theme))
        if len(out) >= rows:
            break
    return out[:rows]


def _inspector_rows(state: ViewerState, width: int, rows: int, theme: UITheme, style: str, no_color: bool) -> list[str]:
    navigator = state.navigator
    node = navigator.selected_node()
    title = " Inspector "
    divider = f"{theme.border}─{title}{'─' * max(0, width - len(title) - 1)}{theme.reset}"
    if node is None:
        body = [f"{theme.empty_hint}   (select an item to inspect it){theme.reset}"]
    else:
        body = inspect_node(node, navigator.types, style=style, no_color=no_color)
    return [divider, *body][:rows]


def _help_rows(theme: UITheme) -> list[str]:
    rows = [f"{theme.help_heading}KEYS{theme.reset}"]
    key_width = max(len(keys) for keys, _ in HELP_ENTRIES)
    for keys, description in HELP_ENTRIES:
        rows.append(f"{theme.help_key}{keys.ljust(key_width)}{theme.reset}  {description}")
    return rows


def _status_text(state: ViewerState) -> str:
    navigator = state.navigator
    selected = navigator.selected_index()
    total = len(navigator.visible_nodes())
    position = "-" if selected is None else str(selected + 1)
    scope = navigator.scope()
    scope_text = f"  scope {' › '.join(scope)}" if scope else ""
    return f" {state.title}  {position}/{total}{scope_text}"


def build_frame_rows(
    state: ViewerState,
    theme: UITheme,
    width: int,
    height: int,
    style: str = "monokai",
    no_color: bool = False,
) -> list[str]:
    """Return exactly ``height`` rows (clipped to ``width``) for the current state."""
    width = max(1, width)
    height = max(1, height)
    rows = _boxed_header(state.title, _header_meta(state), width, theme)
    body_rows = max(0, height - len(rows) - 1)

    footer: list[str] = _help_rows(theme) if state.show_help else []
    footer = footer[: max(0, body_rows - 1)]
    remaining = body_rows - len(footer)

    inspector: list[str] = []
    if state.inspector_open and remaining > 2:
        inspector_rows = remaining // 2
        inspector = _inspector_rows(state, width, inspector_rows, theme, style, no_color)
        remaining -= inspector_rows
        inspector += [""] * (inspector_rows - len(inspector))

    list_rows = _list_rows(state, width, remaining, theme) if remaining > 0 else []
    list_rows += [""] * (remaining - len(list_rows))

    rows.extend(list_rows)
    rows.extend(inspector)
    rows.extend(footer)
    rows = [clip_ansi_line(row, width) for row in rows[: height - 1]]
    rows += [""] * (height - 1 - len(rows))
    status = build_status_line(_status_text(state), width)
    rows.append(f"{theme.reverse}{status}{theme.reset}")
    return rows


def render_frame(
    state: ViewerState,
    theme: UITheme,
    width: int,
    height: int,
    style: str = "monokai",
    no_color: bool = False,
) -> str:
    """Return one full-screen ANSI frame for ``state``."""
    out: list[str] = ["\033[H\033[J"]
    rows = build_frame_rows(state, theme, width, height, style=style, no_color=no_color)
    for idx, row in enumerate(rows):
        out.append(row)
        if "\033" in row:
            out.append("\033[0m")
        if idx < len(rows) - 1:
            out.append("\r\n")
    return "".join(out)


def render_plain_summaries(state: ViewerState, width: int) -> str:
    """Render visible summaries as plain text for non-interactive output."""
    out: list[str] = []
    for block in summary_blocks(state, width):
        out.extend(block.display_lines() or [""])
        out.append("")
    return "\n".join(out)


__all__ = [
    "build_frame_rows",
    "build_status_line",
    "render_frame",
    "render_plain_summaries",
    "scroll_start_for_selection",
    "summary_blocks",
]
