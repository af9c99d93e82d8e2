"""Wrap-around list cursor used for the visible-node list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """Ordered items plus an optional selected index.

    ``last_selected`` remembers the most recent selection so a freshly reset
    list can resume near where the user was.
    """

    def __init__(self, items: Sequence[T] = (), last_selected: int | None = None) -> None:
        self.items: list[T] = list(items)
        self.selected: int | None = None
        self.last_selected = last_selected

    def __len__(self) -> int:
        return len(self.items)

    def _fallback_index(self) -> int:
        last = self.last_selected
        if last is not None and 0 <= last < len(self.items):
            return last
        return 0

    def select(self, index: int | None) -> bool:
        """Select ``index`` when it is in range; ``None`` clears the selection."""
        if index is None:
            self.selected = None
            return True
        if not 0 <= index < len(self.items):
            return False
        self.selected = index
        self.last_selected = index
        return True

    def next(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.select(self._fallback_index())
        elif self.selected >= len(self.items) - 1:
            self.select(0)
        else:
            self.select(self.selected + 1)

    def previous(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.select(self._fallback_index())
        elif self.selected == 0:
            self.select(len(self.items) - 1)
        else:
            self.select(self.selected - 1)

    def start(self) -> None:
        if self.items:
            self.select(0)

    def end(self) -> None:
        if self.items:
            self.select(len(self.items) - 1)

    def current(self) -> T | None:
        """Return the selected item, or ``None`` without a selection."""
        if self.selected is None:
            return None
        return self.items[self.selected]
