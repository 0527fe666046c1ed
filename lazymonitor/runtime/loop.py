"""Main interactive event loop for the monitor.

Each iteration checks the terminal size, redraws when something changed, and
dispatches one key. Feature logic lives on ``MonitorApp``; the loop is wiring.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..input import read_key
from ..render import write_frame
from .terminal import TerminalController

if TYPE_CHECKING:
    from .app import MonitorApp

KEY_POLL_TIMEOUT_MS = 120


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Fold CR, LF and CRLF into a single ``ENTER`` token.

    Returns the key to dispatch (``None`` to drop it) and the new
    skip-next-LF flag.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    app: MonitorApp,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
    write: Callable[[str], None] = write_frame,
) -> None:
    """Run the monitor until ``CTRL_C`` (or an interrupt) is received."""
    state = app.state
    skip_next_lf = False

    with terminal.raw_mode():
        app.start()
        while True:
            term = get_terminal_size((80, 24))
            if (term.columns, term.lines) != (state.columns, state.rows):
                state.dirty = True
            if state.dirty:
                app.layout(term.columns, term.lines)
                write(app.render())
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            except KeyboardInterrupt:
                break
            if key == "":
                continue
            dispatch_key, skip_next_lf = normalize_enter(key, skip_next_lf)
            if dispatch_key is None:
                continue
            if app.handle_key(dispatch_key):
                break
