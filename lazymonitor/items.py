"""Contracts shared by every data source and the records it returns.

Sources are plain objects with a ``fetch_all`` method; items expose four
read-only accessors. Both are structural protocols so example sources and
test doubles need no common base class.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


class MonitorError(Exception):
    """Base class for lazymonitor failures."""


class FetchError(MonitorError):
    """A source could not produce a snapshot for the given query."""


@runtime_checkable
class MonitoredItem(Protocol):
    """One displayable record.

    ``keys()`` must return the same names in the same order on every call and
    must contain ``primary_key()``. ``value()`` returns ``""`` (or another
    placeholder) for unknown keys instead of raising.
    """

    def primary_key(self) -> str: ...

    def keys(self) -> Sequence[str]: ...

    def value(self, key: str) -> str: ...

    def detail(self) -> str: ...


@runtime_checkable
class Source(Protocol):
    """Provider of full item snapshots.

    ``fetch_all`` rejects an empty query and raises ``FetchError`` on failure.
    The returned list replaces whatever the application displayed before.
    """

    def fetch_all(self, query: str) -> list[MonitoredItem]: ...
