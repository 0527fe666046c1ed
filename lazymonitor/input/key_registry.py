"""Scoped key-binding table.

A binding maps key tokens to a handler, either globally (scope ``""``) or
for one focus state only. Dispatch looks at the focused scope first and then
at the global scope, so a panel can shadow a global key.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

GLOBAL_SCOPE = ""


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]
    scope: str = GLOBAL_SCOPE


class BindingTable:
    """Dispatch table keyed by ``(scope, key)``."""

    def __init__(self) -> None:
        self._handlers: dict[tuple[str, str], Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> BindingTable:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[(binding.scope, combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> BindingTable:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, scope: str, key: str) -> Callable[[], bool | None] | None:
        handler = self._handlers.get((scope, key))
        if handler is None and scope != GLOBAL_SCOPE:
            handler = self._handlers.get((GLOBAL_SCOPE, key))
        return handler

    def dispatch(self, scope: str, key: str) -> bool | None:
        """Invoke the handler bound to ``key`` in ``scope``.

        Returns ``None`` when nothing is bound, otherwise the handler result.
        """
        handler = self.lookup(scope, key)
        if handler is None:
            return None
        return handler()
