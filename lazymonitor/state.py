from __future__ import annotations

from dataclasses import dataclass, field

from .items import MonitoredItem

MODE_DETAIL = "detail"
MODE_TABLE = "table"

FOCUS_QUERY = "query"
FOCUS_FILTER = "filter"
FOCUS_LIST = "list"

DEFAULT_FILTER = ".*"


@dataclass
class AppState:
    query: str
    filter_text: str = DEFAULT_FILTER
    mode: str = MODE_DETAIL
    active_key: str = ""
    items: list[MonitoredItem] = field(default_factory=list)
    possible_keys: list[str] = field(default_factory=list)
    last_error: BaseException | None = None
    focus: str = FOCUS_QUERY
    columns: int = 80
    rows: int = 24
    dirty: bool = True
