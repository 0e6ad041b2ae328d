"""Filter grammar for the operation explorer.

The search text is either a plain substring term, or one of the prefixes
``q:``, ``m:`` or ``s:`` followed by a term. A trailing ``e:`` is not part of
the query; it opens the endpoint picker when there is more than one endpoint.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass

from .operations import Operation, OperationKind

TYPE_PREFIXES = {
    "q": OperationKind.QUERY,
    "m": OperationKind.MUTATION,
    "s": OperationKind.SUBSCRIPTION,
}
ENDPOINT_TRIGGER = "e:"

_HINT_LABELS = (
    (OperationKind.QUERY, "q: queries"),
    (OperationKind.MUTATION, "m: mutations"),
    (OperationKind.SUBSCRIPTION, "s: subscriptions"),
)


@dataclass(frozen=True)
class FilterQuery:
    kind: OperationKind | None
    term: str


def parse_filter_query(text: str) -> FilterQuery:
    """Split ``text`` into an optional kind restriction and a lowercased term."""
    if len(text) >= 2 and text[1] == ":":
        kind = TYPE_PREFIXES.get(text[0].lower())
        if kind is not None:
            return FilterQuery(kind, text[2:].strip().lower())
    return FilterQuery(None, text.lower())


def filter_operations(
    operations: Sequence[Operation],
    text: str,
    active_endpoints: Collection[str] = frozenset(),
) -> list[Operation]:
    """Return operations matching kind, endpoint set and term, order preserved.

    An empty ``active_endpoints`` applies no endpoint restriction.
    """
    if not text and not active_endpoints:
        return list(operations)
    query = parse_filter_query(text)
    matches = []
    for op in operations:
        if query.kind is not None and op.kind is not query.kind:
            continue
        if active_endpoints and op.endpoint_short not in active_endpoints:
            continue
        if query.term and query.term not in op.name_lower:
            continue
        matches.append(op)
    return matches


def should_enter_endpoint_picker(value: str, endpoint_count: int) -> bool:
    return endpoint_count > 1 and value.lower().endswith(ENDPOINT_TRIGGER)


def strip_endpoint_trigger(value: str) -> str:
    """Remove every trailing ``e:`` trigger, trimming whitespace as it goes.

    >>> strip_endpoint_trigger("q:e:")
    'q:'
    """
    while True:
        idx = value.lower().rfind(ENDPOINT_TRIGGER)
        if idx < 0:
            return value
        value = value[:idx].strip()


def collect_endpoints(operations: Iterable[Operation]) -> list[str]:
    """Distinct shortened endpoints, sorted."""
    return sorted({op.endpoint_short for op in operations if op.endpoint_short})


def build_filter_hint(operations: Iterable[Operation], endpoints: Sequence[str]) -> str:
    kinds = {op.kind for op in operations}
    parts = []
    if len(kinds) >= 2:
        parts.extend(label for kind, label in _HINT_LABELS if kind in kinds)
    if len(endpoints) > 1:
        parts.append("e: endpoints")
    return " | ".join(parts)
