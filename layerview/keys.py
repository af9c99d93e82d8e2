"""Key-combo registry and the viewer's default key bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .state import ViewerState


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its handled result."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()


def build_viewer_key_registry(state: ViewerState) -> KeyComboRegistry:
    """Bind navigation, view toggles and quit keys to ``state``.

    Every handler returns ``True`` so the caller repaints after it runs.
    """
    navigator = state.navigator

    def run(action: Callable[[], object]) -> Callable[[], bool]:
        def handler() -> bool:
            action()
            return True

        return handler

    def toggle_help() -> None:
        state.show_help = not state.show_help

    def toggle_inspector() -> None:
        state.inspector_open = not state.inspector_open

    def quit_viewer() -> None:
        state.should_quit = True

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("j", "DOWN", "TAB"), run(navigator.cycle_next)),
        KeyComboBinding(("k", "UP"), run(navigator.cycle_previous)),
        KeyComboBinding(("l", "RIGHT", "ENTER"), run(navigator.descend)),
        KeyComboBinding(("h", "LEFT", "BACKSPACE"), run(navigator.ascend)),
        KeyComboBinding(("g", "HOME"), run(navigator.jump_start)),
        KeyComboBinding(("G", "END"), run(navigator.jump_end)),
        KeyComboBinding(("i",), run(toggle_inspector)),
        KeyComboBinding(("?",), run(toggle_help)),
        KeyComboBinding(("q", "ESC", "CTRL_C"), run(quit_viewer)),
    )


def handle_key(state: ViewerState, registry: KeyComboRegistry, key: str) -> bool:
    """Dispatch ``key`` and mark the state dirty when a binding handled it."""
    if not key:
        return False
    handled = bool(registry.dispatch(key))
    if handled:
        state.dirty = True
    return handled
