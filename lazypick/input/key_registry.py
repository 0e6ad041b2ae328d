"""Key-token to action dispatch tables used by picker sessions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], None]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: KeyAction


class KeyComboRegistry:
    """Exact-match dispatch table from key tokens to session actions."""

    def __init__(self) -> None:
        self._handlers: dict[str, KeyAction] = {}

    def bind(self, handler: KeyAction, *combos: str) -> KeyComboRegistry:
        """Register ``handler`` for ``combos`` and return ``self`` for chaining."""
        return self.register_binding(KeyComboBinding(combos=combos, handler=handler))

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True
