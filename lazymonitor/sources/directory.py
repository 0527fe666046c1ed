"""Directory listing source: one item per entry of an absolute directory."""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone

from ..items import FetchError, MonitoredItem

logger = logging.getLogger(__name__)

FILE_ITEM_KEYS: tuple[str, ...] = ("path", "size", "mode", "mtime")


@dataclass(frozen=True)
class FileItem:
    """One directory entry with its ``lstat`` metadata."""

    path: str
    size: int
    mode: int
    mtime: datetime

    def primary_key(self) -> str:
        return "path"

    def keys(self) -> list[str]:
        return list(FILE_ITEM_KEYS)

    def value(self, key: str) -> str:
        if key == "path":
            return self.path
        if key == "size":
            return str(self.size)
        if key == "mode":
            return stat.filemode(self.mode)
        if key == "mtime":
            return self.mtime.isoformat(sep=" ")
        return ""

    def detail(self) -> str:
        payload = {
            "path": self.path,
            "size": self.size,
            "mode": stat.filemode(self.mode),
            "mtime": self.mtime.isoformat(),
        }
        return json.dumps(payload, indent=1) + "\n"


class DirectorySource:
    """List the entries of the directory named by the query."""

    def fetch_all(self, query: str) -> list[MonitoredItem]:
        if not query:
            raise FetchError("Empty query")
        if not os.path.isabs(query):
            raise FetchError("Relative query path")

        items: list[MonitoredItem] = []
        try:
            with os.scandir(query) as entries:
                for entry in entries:
                    try:
                        info = entry.stat(follow_symlinks=False)
                    except OSError as exc:
                        logger.debug("skipping %s: %s", entry.path, exc)
                        continue
                    items.append(
                        FileItem(
                            path=entry.name,
                            size=info.st_size,
                            mode=info.st_mode,
                            mtime=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
                        )
                    )
        except OSError as exc:
            raise FetchError(f"cannot list {query}: {exc.strerror or exc}") from exc
        return items
