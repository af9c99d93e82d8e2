"""Public package surface for layerview.

Exports ``main`` for programmatic CLI invocation.
The navigator and summarizer live under ``layerview.navigation`` and
``layerview.summary``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
