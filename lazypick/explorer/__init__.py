"""GraphQL operation explorer: filter grammar, endpoint picker, detail panel."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..selection import EmptyCandidatesError, SessionResult
from ..ui_theme import DEFAULT_THEME, UITheme
from .endpoint_picker import EndpointPicker
from .explorer import OperationExplorer, Panel
from .filtering import (
    FilterQuery,
    build_filter_hint,
    collect_endpoints,
    filter_operations,
    parse_filter_query,
    should_enter_endpoint_picker,
    strip_endpoint_trigger,
)
from .operations import (
    Argument,
    InputField,
    InputType,
    Operation,
    OperationKind,
    collect_input_types,
    collect_operations,
    extract_base_type,
    scoped_type_key,
    shorten_endpoint,
    sort_by_kind,
)


def run_explorer(
    operations: Sequence[Operation],
    input_types: Mapping[str, InputType] | None = None,
    *,
    theme: UITheme = DEFAULT_THEME,
    scroll_margin: int | None = None,
) -> SessionResult[Operation]:
    """Run the explorer full-screen and return the committed operation."""
    if not operations:
        raise EmptyCandidatesError("no operations to explore")
    from ..runtime import run_interactive

    kwargs = {} if scroll_margin is None else {"scroll_margin": scroll_margin}
    return run_interactive(OperationExplorer(operations, input_types, theme=theme, **kwargs))


__all__ = [
    "Argument",
    "EndpointPicker",
    "FilterQuery",
    "InputField",
    "InputType",
    "Operation",
    "OperationExplorer",
    "OperationKind",
    "Panel",
    "build_filter_hint",
    "collect_endpoints",
    "collect_input_types",
    "collect_operations",
    "extract_base_type",
    "filter_operations",
    "parse_filter_query",
    "run_explorer",
    "scoped_type_key",
    "shorten_endpoint",
    "should_enter_endpoint_picker",
    "sort_by_kind",
    "strip_endpoint_trigger",
]
