"""Command-line front door for lazymonitor.

Parses CLI options, picks an example source and sets up logging.
Then dispatches into the interactive monitor runtime, or prints one
table snapshot with ``--render``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .filters import compile_filters
from .items import MonitorError
from .pipeline import effective_key_value, execute_query
from .render.table import render_table, single_line
from .runtime import run_monitor
from .runtime.config import load_monitor_config
from .sources import SOURCE_FACTORIES
from .state import AppState
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None, verbose: bool) -> None:
    """Send log records to ``log_file``; without one, logging stays silent.

    The screen belongs to the monitor, so nothing is ever logged to a stream.
    """
    root = logging.getLogger()
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def render_snapshot(source, query: str, active_key: str, filter_text: str) -> str:
    """Run ``query`` once and return the list key plus table row of every item."""
    state = AppState(query=query, filter_text=filter_text, active_key=active_key)
    execute_query(state, source, query)
    if state.last_error is not None:
        raise SystemExit(f"lazymonitor: {state.last_error}")
    table = render_table(state.items, state.active_key, compile_filters(filter_text))
    rows = table.split("\n") if state.items else []
    out: list[str] = []
    for item, row in zip(state.items, rows):
        label = single_line(effective_key_value(item, state.active_key))
        out.append(f"{label}\t{row}".rstrip() + "\n")
    return "".join(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse snapshots of monitored objects in a terminal UI."
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Initial query. Defaults to a source-specific value.",
    )
    parser.add_argument(
        "--source",
        choices=sorted(SOURCE_FACTORIES),
        default="paths",
        help="Example data source (default: paths).",
    )
    parser.add_argument("--key", default="", help="Sort and list items by this key instead of their primary key.")
    parser.add_argument("--style", default=None, help="Pygments style name for the detail view.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--render", action="store_true", help="Print one table snapshot and exit.")
    parser.add_argument("--log-file", default=None, help="Write log records to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug records (with --log-file).")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the monitor on the chosen source."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)

    factory, default_query = SOURCE_FACTORIES[args.source]
    query = args.query if args.query is not None else default_query
    config = load_monitor_config()
    source = factory()

    if args.render:
        sys.stdout.write(render_snapshot(source, query, args.key, config.default_filter))
        return

    try:
        run_monitor(
            source,
            query,
            no_color=args.no_color,
            theme_name=args.theme,
            style=args.style,
            active_key=args.key,
            config=config,
        )
    except MonitorError as exc:
        raise SystemExit(f"lazymonitor: {exc}") from exc


if __name__ == "__main__":
    main()
