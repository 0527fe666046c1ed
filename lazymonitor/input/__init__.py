"""Input-layer public API for key decoding and focus-aware dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
binding table used by the runtime loop.
"""

from .bindings import MonitorKeyActions, build_binding_table, handle_key
from .key_registry import GLOBAL_SCOPE, BindingTable, KeyComboBinding
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "GLOBAL_SCOPE",
    "BindingTable",
    "KeyComboBinding",
    "MonitorKeyActions",
    "build_binding_table",
    "handle_key",
]
