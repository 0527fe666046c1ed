"""Query execution: fetch a snapshot, discover its keys, and sort it.

Everything here mutates the single ``AppState`` handed in by the caller.
Fetch failures are stored on the state instead of propagating.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .items import FetchError, MonitoredItem, Source
from .state import AppState

logger = logging.getLogger(__name__)

QUERY_TRIM_CHARS = " \t\r\n"


def effective_key_name(item: MonitoredItem, active_key: str) -> str:
    """Return the explicit active key, or the item's own primary key."""
    if active_key:
        return active_key
    return item.primary_key()


def effective_key_value(item: MonitoredItem, active_key: str) -> str:
    return item.value(effective_key_name(item, active_key))


def collect_possible_keys(items: Iterable[MonitoredItem]) -> list[str]:
    """Return the sorted union of every item's primary key and keys."""
    names: set[str] = set()
    for item in items:
        names.add(item.primary_key())
        names.update(item.keys())
    return sorted(names)


def sort_items(items: list[MonitoredItem], active_key: str) -> None:
    # The sort key is resolved per item: without an active key each item
    # falls back to its own primary key.
    items.sort(key=lambda item: effective_key_value(item, active_key))


def fetch_snapshot(source: Source, query: str) -> list[MonitoredItem]:
    """Call the source, rejecting an empty query before any I/O happens."""
    if not query:
        raise FetchError("Empty query")
    return list(source.fetch_all(query))


def execute_query(state: AppState, source: Source, query_text: str) -> None:
    """Run one query and replace the state's snapshot wholesale.

    On failure the error is kept in ``state.last_error`` and the item list is
    emptied; on success the error is cleared. Keys are recomputed and the
    snapshot sorted in both cases.
    """
    state.query = query_text.strip(QUERY_TRIM_CHARS)
    try:
        items = fetch_snapshot(source, state.query)
    except Exception as exc:
        logger.warning("query %r failed: %s", state.query, exc)
        state.last_error = exc
        state.items = []
    else:
        logger.info("query %r returned %d items", state.query, len(items))
        state.last_error = None
        state.items = items

    state.possible_keys = collect_possible_keys(state.items)
    sort_items(state.items, state.active_key)


def select_key(state: AppState, name: str) -> None:
    """Change the key used for sorting and list display, then re-sort.

    An empty ``name`` restores per-item primary keys. The current snapshot is
    re-sorted in place; nothing is fetched again.
    """
    state.active_key = name.strip(QUERY_TRIM_CHARS)
    state.possible_keys = collect_possible_keys(state.items)
    sort_items(state.items, state.active_key)
