"""Persistent JSON config helpers.

Stores the UI theme name and the last visited navigation depth.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .navigation import Session

logger = logging.getLogger(__name__)

APP_NAME = "layerview"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("config not loaded from %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks the viewer.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("config not saved to %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_session() -> Session | None:
    """Load the last navigation snapshot.

    Booleans, negative numbers and non-integers are rejected so a damaged
    file cannot push the navigator to a nonsense depth.
    """
    raw = load_config().get("session")
    if not isinstance(raw, dict):
        return None
    depth = raw.get("depth")
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        return None
    return Session(depth=depth)


def save_session(session: Session) -> None:
    """Persist the navigation snapshot under the ``session`` key."""
    config = load_config()
    config["session"] = {"depth": max(0, int(session.depth))}
    save_config(config)
