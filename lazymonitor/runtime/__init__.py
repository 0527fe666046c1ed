"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_monitor`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_monitor(*args, **kwargs):
    """Lazily import the monitor entrypoint to avoid runtime bootstrap on import."""
    from .app import run_monitor as _run_monitor

    return _run_monitor(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_monitor",
    "run_main_loop",
]
