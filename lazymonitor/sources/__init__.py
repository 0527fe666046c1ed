"""Example data sources for the monitor.

``SOURCE_FACTORIES`` maps the CLI ``--source`` names to source constructors,
together with the query each source starts with.
"""

from __future__ import annotations

from collections.abc import Callable

from ..items import Source
from .directory import DirectorySource, FileItem
from .remote import ObjectItem, RemoteObjectSource
from .synthetic import MapItem, SyntheticMapSource

SOURCE_FACTORIES: dict[str, tuple[Callable[[], Source], str]] = {
    "paths": (DirectorySource, "/var/log"),
    "maps": (SyntheticMapSource, "/var/log"),
    "rpc": (RemoteObjectSource, "127.0.0.1"),
}

__all__ = [
    "SOURCE_FACTORIES",
    "DirectorySource",
    "FileItem",
    "MapItem",
    "ObjectItem",
    "RemoteObjectSource",
    "SyntheticMapSource",
]
