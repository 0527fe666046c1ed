"""Synthetic source: a fixed pool of random records, windowed by query.

Each record holds 20 of 40 drive-health field names mapped to random hex
strings. A query picks a deterministic window of the pool derived from its
md5 digest, so the same query always yields the same snapshot.
"""

from __future__ import annotations

import hashlib
import json
import random

from ..items import FetchError, MonitoredItem

FIELD_NAMES: tuple[str, ...] = (
    "address",
    "critical_warning",
    "temperature",
    "spare",
    "spare_threshold",
    "lifetime_used",
    "units_read_hi",
    "units_read_lo",
    "units_written_hi",
    "units_written_lo",
    "host_read_cmds_hi",
    "host_read_cmds",
    "host_write_cmds_hi",
    "host_write_cmds_lo",
    "busy_mins_hi",
    "busy_mins_lo",
    "power_cycles_hi",
    "power_cycles_lo",
    "uptime_hi",
    "uptime_lo",
    "unsafe_shutdowns_hi",
    "unsafe_shutdowns_lo",
    "media_errors_hi",
    "media_errors_lo",
    "error_log_count_hi",
    "error_log_count_lo",
    "sav_arb",
    "def_arb",
    "cur_arb",
    "cap_arb",
    "sav_pwr_mgmt",
    "def_pwr_mgmt",
    "cur_pwr_mgmt",
    "cap_pwr_mgmt",
    "sav_temp_thresh",
    "def_temp_thresh",
    "cur_temp_thresh",
    "cap_temp_thresh",
    "sav_err_recov",
    "def_err_recov",
)

POOL_SIZE = 8192
WINDOW_SIZE = 1024
FIELDS_PER_RECORD = 20


class MapItem:
    """Record backed by an ordered ``dict`` of field name to value."""

    def __init__(self, fields: dict[str, str]) -> None:
        self.fields = dict(fields)

    def primary_key(self) -> str:
        return next(iter(self.fields), "")

    def keys(self) -> list[str]:
        return list(self.fields)

    def value(self, key: str) -> str:
        return self.fields.get(key, "")

    def detail(self) -> str:
        return json.dumps(self.fields, indent=1) + "\n"


def generate_random_item(rng: random.Random) -> MapItem:
    names = rng.sample(FIELD_NAMES, FIELDS_PER_RECORD)
    return MapItem({name: format(rng.getrandbits(64), "x") for name in names})


def query_offset(query: str) -> int:
    """Return the pool offset for ``query``: xor of both halves of its md5 digest."""
    digest = hashlib.md5(query.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little") ^ int.from_bytes(digest[8:], "little")


class SyntheticMapSource:
    """In-memory pool of random records; ``seed`` makes the pool reproducible."""

    def __init__(
        self,
        pool_size: int = POOL_SIZE,
        window_size: int = WINDOW_SIZE,
        seed: int | None = None,
    ) -> None:
        rng = random.Random(seed)
        self.pool: list[MapItem] = [generate_random_item(rng) for _ in range(max(1, pool_size))]
        self.window_size = window_size

    def fetch_all(self, query: str) -> list[MonitoredItem]:
        if not query:
            raise FetchError("Empty query")
        offset = query_offset(query)
        size = len(self.pool)
        return [self.pool[(offset + idx) % size] for idx in range(self.window_size)]
