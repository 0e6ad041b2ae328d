"""Explorer rendering: operation list, endpoint picker, badges, detail panel."""

from __future__ import annotations

import textwrap
from collections.abc import Collection, Mapping, Sequence

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from ..ansi import ELLIPSIS, display_width, truncate_with_ellipsis
from ..ui_theme import UITheme
from .endpoint_picker import EndpointPicker
from .operations import InputType, Operation, OperationKind, extract_base_type, resolve_input_type

ITEM_PADDING = 4
DETAIL_PADDING = 6
CHEVRON = "> "
CHECK_MARK = "✓"
NO_MATCHES_LABEL = "(no matches)"
TREE_BRANCH = "│"
MAX_INPUT_TYPE_DEPTH = 3

ITEM_PREFIX = " " * ITEM_PADDING
SELECTED_PREFIX = " " * (ITEM_PADDING - len(CHEVRON)) + CHEVRON
DETAIL_PREFIX = " " * DETAIL_PADDING
TOGGLE_OFF = "  "
TOGGLE_ON = CHECK_MARK + " "

_FORMATTER = TerminalFormatter()


def kind_style(theme: UITheme, kind: OperationKind) -> str:
    return {
        OperationKind.QUERY: theme.badge_query,
        OperationKind.MUTATION: theme.badge_mutation,
        OperationKind.SUBSCRIPTION: theme.badge_subscription,
    }[kind]


def render_badge(text: str, style: str, theme: UITheme) -> str:
    return theme.paint(theme.badge_background + style, f" {text} ")


def _wrapped_help(text: str, width: int, theme: UITheme) -> list[str]:
    if not text:
        return []
    return [theme.paint(theme.help, DETAIL_PREFIX + line) for line in textwrap.wrap(text, max(width, 1))]


def render_operation_list(
    operations: Sequence[Operation],
    cursor: int,
    theme: UITheme,
    width: int = 0,
) -> tuple[str, int]:
    """Render operations grouped under kind badges.

    The highlighted row also shows its description and full endpoint URL.
    Returns the content and the line index of the highlighted row.
    """
    if not operations:
        return theme.paint(theme.help, " " * (ITEM_PADDING - len(CHEVRON)) + NO_MATCHES_LABEL), 0

    wrap_width = max(width - DETAIL_PADDING, 1) if width > 0 else 72
    lines: list[str] = []
    cursor_line = 0
    current_kind: OperationKind | None = None
    for idx, op in enumerate(operations):
        if op.kind is not current_kind:
            current_kind = op.kind
            if lines:
                lines.append("")
            lines.append(render_badge(op.kind.value, kind_style(theme, op.kind), theme))
        if idx == cursor:
            cursor_line = len(lines)
            name = op.name if width <= 0 else truncate_with_ellipsis(op.name, width - len(SELECTED_PREFIX))
            lines.append(theme.paint(theme.subtitle, SELECTED_PREFIX + name))
            lines.extend(_wrapped_help(op.description, wrap_width, theme))
            lines.extend(_wrapped_help(op.endpoint, wrap_width, theme))
        else:
            name = op.name if width <= 0 else truncate_with_ellipsis(op.name, width - len(ITEM_PREFIX))
            lines.append(ITEM_PREFIX + name)
    return "\n".join(lines), cursor_line


def render_endpoint_picker(picker: EndpointPicker, theme: UITheme) -> tuple[str, int]:
    if not picker.endpoints:
        return theme.paint(theme.help, ITEM_PREFIX + NO_MATCHES_LABEL), 0
    lines = []
    for idx, endpoint in enumerate(picker.endpoints):
        toggle = theme.paint(theme.toggle_on, TOGGLE_ON) if picker.is_checked(endpoint) else TOGGLE_OFF
        if idx == picker.cursor:
            lines.append(theme.paint(theme.subtitle, SELECTED_PREFIX) + toggle + theme.paint(theme.subtitle, endpoint))
        else:
            lines.append(ITEM_PREFIX + toggle + endpoint)
    return "\n".join(lines), picker.cursor


def render_active_badges(active: Collection[str], theme: UITheme, max_width: int) -> str:
    """Render one badge per active endpoint, collapsing overflow into an ellipsis."""
    ellipsis = theme.paint(theme.help, ELLIPSIS)
    ellipsis_width = 1 + display_width(ELLIPSIS)
    result = ""
    for idx, endpoint in enumerate(sorted(active)):
        badge = render_badge(endpoint, theme.badge_endpoint, theme)
        candidate = f"{result} {badge}" if result else badge
        if idx == 0 and display_width(candidate) > max_width:
            return ellipsis
        if idx > 0 and display_width(candidate) + ellipsis_width > max_width:
            return f"{result} {ellipsis}"
        result = candidate
    return result


def build_signature(op: Operation) -> str:
    """Return a GraphQL-style signature such as ``query getUser(id: ID!): User!``."""
    args = ", ".join(f"{arg.name}: {arg.type}" for arg in op.arguments)
    signature = f"{op.kind.value} {op.name}"
    if args:
        signature += f"({args})"
    if op.return_type:
        signature += f": {op.return_type}"
    return signature


def highlight_signature(signature: str, theme: UITheme) -> str:
    if not theme.reset:
        return signature
    try:
        lexer = get_lexer_by_name("graphql")
    except ClassNotFound:
        lexer = TextLexer()
    try:
        return highlight(signature, lexer, _FORMATTER).rstrip("\n")
    except Exception:
        return signature


def _input_type_fields(
    input_type: InputType,
    indent: str,
    input_types: Mapping[str, InputType],
    endpoint: str,
    depth: int,
    theme: UITheme,
) -> list[str]:
    lines = []
    last = len(input_type.fields) - 1
    for idx, item in enumerate(input_type.fields):
        connector = "└─" if idx == last else "├─"
        lines.append(f"{indent}{theme.paint(theme.help, connector)} {item.name}  {theme.paint(theme.help, item.type)}")
        if depth >= MAX_INPUT_TYPE_DEPTH:
            continue
        nested = resolve_input_type(input_types, endpoint, extract_base_type(item.type))
        if nested is None:
            continue
        child_indent = indent + "  " if idx == last else indent + theme.paint(theme.help, TREE_BRANCH) + " "
        lines.extend(_input_type_fields(nested, child_indent, input_types, endpoint, depth + 1, theme))
    return lines


def render_detail(
    op: Operation,
    input_types: Mapping[str, InputType],
    theme: UITheme,
) -> list[str]:
    """Render the detail panel for ``op``.

    Shows the return type, an aligned argument table with required markers,
    the fields of any input-type arguments as a tree, and the signature.
    """
    pad = "  "
    arg_pad = "    "
    lines = [theme.paint(theme.subtitle, CHEVRON + op.name), ""]

    if op.return_type:
        lines.extend([pad + theme.paint(theme.help, "Returns: ") + op.return_type, ""])

    if op.arguments:
        lines.append(pad + theme.paint(theme.help, "Arguments:"))
        name_width = max(len(arg.name) for arg in op.arguments)
        type_width = max(len(arg.type) for arg in op.arguments)
        for arg in op.arguments:
            required = " " + theme.paint(theme.help, "(required)") if arg.required else ""
            lines.append(f"{arg_pad}{arg.name:<{name_width}}  {arg.type:<{type_width}}{required}".rstrip())
            input_type = resolve_input_type(input_types, op.endpoint, extract_base_type(arg.type))
            if input_type is not None:
                lines.extend(_input_type_fields(input_type, arg_pad + "  ", input_types, op.endpoint, 1, theme))
        lines.append("")

    lines.append(pad + highlight_signature(build_signature(op), theme))
    return lines
