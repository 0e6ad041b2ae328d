"""Endpoint multi-select with a draft that only lands on commit."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..selection.cursor import move_cursor

logger = logging.getLogger(__name__)


class EndpointPicker:
    """Holds the active endpoint set and, while open, a pending draft of it.

    ``active`` is a frozenset that is replaced on commit and never mutated,
    so toggles made in the picker cannot leak into filtering before then.
    """

    def __init__(self, endpoints: Sequence[str]) -> None:
        self.endpoints = tuple(endpoints)
        self.active: frozenset[str] = frozenset()
        self.pending: set[str] | None = None
        self.cursor = 0

    @property
    def is_open(self) -> bool:
        return self.pending is not None

    def open(self) -> None:
        self.pending = set(self.active)
        self.cursor = 0
        logger.debug("endpoint picker opened with %d active", len(self.active))

    def move(self, direction: int) -> None:
        self.cursor = move_cursor(self.cursor, direction, len(self.endpoints) - 1)

    def toggle(self) -> None:
        if self.pending is None or not self.endpoints:
            return
        endpoint = self.endpoints[self.cursor]
        if endpoint in self.pending:
            self.pending.discard(endpoint)
        else:
            self.pending.add(endpoint)

    def is_checked(self, endpoint: str) -> bool:
        return self.pending is not None and endpoint in self.pending

    def commit(self) -> None:
        if self.pending is None:
            return
        self.active = frozenset(self.pending)
        self.pending = None
        logger.debug("endpoint picker committed %s", sorted(self.active))

    def discard(self) -> None:
        self.pending = None
        logger.debug("endpoint picker cancelled")
