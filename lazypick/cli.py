"""Command-line front door for lazypick.

Parses CLI options, loads candidates from arguments or files, resolves theme,
scroll margin and logging from flags and the persisted config, then runs one
interactive picker and prints its selection.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .dual_pane import run_dual_pane
from .explorer import InputType, Operation, collect_input_types, collect_operations, run_explorer
from .explorer.rendering import build_signature
from .runtime.config import load_log_level, load_scroll_margin, load_theme_name, save_theme_name
from .runtime.logs import configure_logging
from .selection import EmptyCandidatesError
from .selector import run_selector
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

# Exit status for a cancelled picker, so shell callers can tell it from success.
EXIT_CANCELLED = 1


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _split_csv(values: Sequence[str] | None) -> list[str]:
    items: list[str] = []
    for value in values or ():
        items.extend(part.strip() for part in value.split(","))
    return [item for item in items if item]


def read_lines(path: Path) -> list[str]:
    """Read non-blank, stripped lines from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_schema_file(path: Path) -> tuple[list[Operation], dict[str, InputType]]:
    """Load one schema JSON file.

    The file is an object with an optional ``endpoint`` URL, the operation
    lists ``queries``, ``mutations`` and ``subscriptions``, and an optional
    ``input_types`` mapping.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"Expected a JSON object in {path}")
    endpoint = str(data.get("endpoint") or "")
    return collect_operations(data, endpoint), collect_input_types(data, endpoint)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazypick",
        description="Pick strings, environment/file pairs, or GraphQL operations in the terminal.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        type=str.lower,
        choices=available_theme_names(),
        help="UI theme name; remembered for next runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--scroll-margin", type=_non_negative_int, default=None, help="Rows kept between cursor and list edge.")
    parser.add_argument("--log-level", default=None, help="Write logs at this level (DEBUG, INFO, ...).")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path (default: user log directory).")
    sub = parser.add_subparsers(dest="command", required=True)

    select = sub.add_parser("select", help="Pick one string from a list.")
    select.add_argument("items", nargs="*", help="Candidates to choose from.")
    select.add_argument("--from", dest="from_file", type=Path, default=None, help="Read candidates, one per line.")
    select.add_argument("--prompt", default="Select: ", help="Prompt label.")

    pair = sub.add_parser("pair", help="Pick an environment, then a request file.")
    pair.add_argument("--envs", action="append", default=None, help="Comma-separated environment names.")
    pair.add_argument("--files", action="append", default=None, help="Comma-separated request file paths.")
    pair.add_argument("--files-from", type=Path, default=None, help="Read request files, one per line.")
    pair.add_argument("--env", default=None, help="Lock the environment to this value.")

    explore = sub.add_parser("explore", help="Browse GraphQL operations from schema JSON files.")
    explore.add_argument("schemas", nargs="+", type=Path, help="Schema JSON files.")
    return parser


def _resolve_theme(args: argparse.Namespace) -> UITheme:
    if args.theme:
        save_theme_name(args.theme)
    return resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)


def _run_select(args: argparse.Namespace, theme: UITheme, scroll_margin: int) -> str | None:
    items = list(args.items)
    if args.from_file is not None:
        items.extend(read_lines(args.from_file))
    result = run_selector(items, args.prompt, theme=theme, scroll_margin=scroll_margin)
    return None if result.cancelled else result.selection


def _run_pair(args: argparse.Namespace, theme: UITheme, scroll_margin: int) -> str | None:
    files = _split_csv(args.files)
    if args.files_from is not None:
        files.extend(read_lines(args.files_from))
    env_locked = args.env is not None
    result = run_dual_pane(
        _split_csv(args.envs),
        files,
        args.env or "",
        env_locked,
        theme=theme,
        scroll_margin=scroll_margin,
    )
    if result.cancelled:
        return None
    return f"{result.selection.env}\t{result.selection.file}"


def _run_explore(args: argparse.Namespace, theme: UITheme, scroll_margin: int) -> str | None:
    operations: list[Operation] = []
    input_types: dict[str, InputType] = {}
    for path in args.schemas:
        ops, types = load_schema_file(path)
        operations.extend(ops)
        input_types.update(types)
    result = run_explorer(operations, input_types, theme=theme, scroll_margin=scroll_margin)
    return None if result.cancelled else build_signature(result.selection)


_COMMANDS = {
    "select": _run_select,
    "pair": _run_pair,
    "explore": _run_explore,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, run the chosen picker and print its selection.

    A cancelled picker exits with status 1 and prints nothing.
    """
    args = build_parser().parse_args(argv)

    try:
        log_path = configure_logging(args.log_level or load_log_level(), args.log_file)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if log_path is not None:
        logger.info("logging to %s", log_path)

    theme = _resolve_theme(args)
    scroll_margin = args.scroll_margin if args.scroll_margin is not None else load_scroll_margin()

    try:
        output = _COMMANDS[args.command](args, theme, scroll_margin)
    except EmptyCandidatesError as exc:
        raise SystemExit(f"lazypick: {exc}") from exc

    if output is None:
        logger.info("%s cancelled", args.command)
        raise SystemExit(EXIT_CANCELLED)
    sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
