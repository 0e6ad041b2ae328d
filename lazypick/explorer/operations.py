"""Operation records and schema ingestion for the explorer.

Operations are grouped by kind in a fixed rank (query, mutation,
subscription) once at ingestion; within a kind the schema order is kept.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from urllib.parse import urlsplit

SCOPE_SEPARATOR = "\x1f"
_ENDPOINT_SUFFIXES = ("/graphql", "/gql", "/")


class OperationKind(str, enum.Enum):
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


TYPE_RANK = {
    OperationKind.QUERY: 0,
    OperationKind.MUTATION: 1,
    OperationKind.SUBSCRIPTION: 2,
}

# Schema mapping key for each kind, in ingestion order.
SCHEMA_SECTIONS = (
    ("queries", OperationKind.QUERY),
    ("mutations", OperationKind.MUTATION),
    ("subscriptions", OperationKind.SUBSCRIPTION),
)


@dataclass(frozen=True)
class Argument:
    name: str
    type: str
    default_value: str = ""

    @property
    def required(self) -> bool:
        return self.type.endswith("!")


@dataclass(frozen=True)
class InputField:
    name: str
    type: str


@dataclass(frozen=True)
class InputType:
    name: str
    fields: tuple[InputField, ...] = ()


@dataclass
class Operation:
    """One query, mutation or subscription exposed by an endpoint.

    ``name_lower`` is a matching cache; assigning ``name`` refreshes it.
    """

    name: str
    kind: OperationKind
    description: str = ""
    endpoint: str = ""
    arguments: tuple[Argument, ...] = ()
    return_type: str = ""
    endpoint_short: str = ""
    name_lower: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.endpoint_short and self.endpoint:
            self.endpoint_short = shorten_endpoint(self.endpoint)

    def __setattr__(self, key: str, value: object) -> None:
        super().__setattr__(key, value)
        if key == "name":
            super().__setattr__("name_lower", str(value).lower())


def shorten_endpoint(raw_url: str) -> str:
    """Return ``host[/path]`` for an endpoint URL, without a GraphQL suffix.

    >>> shorten_endpoint("https://api.spacex.com/graphql?token=123")
    'api.spacex.com'
    """
    if "://" in raw_url:
        parts = urlsplit(raw_url)
        if parts.netloc:
            path = _trim_endpoint_suffixes(parts.path)
            if not path:
                return parts.netloc
            return parts.netloc + (path if path.startswith("/") else "/" + path)

    value = raw_url.removeprefix("https://").removeprefix("http://")
    value = value.split("?", 1)[0].split("#", 1)[0]
    return _trim_endpoint_suffixes(value)


def _trim_endpoint_suffixes(path: str) -> str:
    for suffix in _ENDPOINT_SUFFIXES:
        path = path.removesuffix(suffix)
    return path


def extract_base_type(type_ref: str) -> str:
    """Strip list brackets and non-null markers: ``[PersonInput!]!`` -> ``PersonInput``."""
    return type_ref.replace("[", "").replace("]", "").replace("!", "").strip()


def scoped_type_key(endpoint: str, name: str) -> str:
    return f"{endpoint}{SCOPE_SEPARATOR}{name}"


def resolve_input_type(
    input_types: Mapping[str, InputType],
    endpoint: str,
    base_type: str,
) -> InputType | None:
    """Look up an input type scoped to ``endpoint`` first, then by bare name."""
    found = input_types.get(scoped_type_key(endpoint, base_type))
    if found is not None:
        return found
    return input_types.get(base_type)


def sort_by_kind(operations: Iterable[Operation]) -> list[Operation]:
    """Group by kind rank; ``sorted`` is stable so schema order survives."""
    return sorted(operations, key=lambda op: TYPE_RANK[op.kind])


def _argument_from(raw: Mapping[str, object]) -> Argument:
    return Argument(
        name=str(raw.get("name", "")),
        type=str(raw.get("type", "")),
        default_value=str(raw.get("default_value") or ""),
    )


def collect_operations(schema: Mapping[str, object], endpoint: str) -> list[Operation]:
    """Convert a plain schema mapping into operation records.

    ``schema`` holds ``queries``, ``mutations`` and ``subscriptions`` lists of
    ``{name, description, arguments, return_type}`` mappings. Missing sections
    are treated as empty.
    """
    short = shorten_endpoint(endpoint) if endpoint else ""
    operations: list[Operation] = []
    for section, kind in SCHEMA_SECTIONS:
        for raw in schema.get(section) or ():
            operations.append(
                Operation(
                    name=str(raw.get("name", "")),
                    kind=kind,
                    description=str(raw.get("description") or ""),
                    endpoint=endpoint,
                    arguments=tuple(_argument_from(arg) for arg in raw.get("arguments") or ()),
                    return_type=str(raw.get("return_type") or ""),
                    endpoint_short=short,
                )
            )
    return operations


def collect_input_types(schema: Mapping[str, object], endpoint: str) -> dict[str, InputType]:
    """Index the schema's ``input_types`` mapping under endpoint-scoped keys."""
    collected: dict[str, InputType] = {}
    raw_types = schema.get("input_types") or {}
    for name, raw in raw_types.items():
        fields = tuple(
            InputField(name=str(item.get("name", "")), type=str(item.get("type", "")))
            for item in raw.get("fields") or ()
        )
        collected[scoped_type_key(endpoint, name)] = InputType(name=name, fields=fields)
    return collected
