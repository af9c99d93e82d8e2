"""Navigation state over a loaded batch: the list cursor and the depth navigator."""

from .navigator import DEFAULT_DEPTH, Navigator, Session
from .selection import SelectionList

__all__ = [
    "DEFAULT_DEPTH",
    "Navigator",
    "SelectionList",
    "Session",
]
