"""Persistent JSON config helpers.

Stores the UI theme name, list scroll margin, and log level. Missing or
malformed config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..selection.viewport import DEFAULT_SCROLL_MARGIN

logger = logging.getLogger(__name__)

APP_NAME = "lazypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MAX_SCROLL_MARGIN = 20


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_scroll_margin() -> int:
    """Return the list scroll margin.

    Booleans, non-integers and negatives fall back to the default; large
    values are capped.
    """
    value = load_config().get("scroll_margin")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_SCROLL_MARGIN
    return min(value, MAX_SCROLL_MARGIN)


def load_log_level() -> str | None:
    """Return the persisted log level name, or ``None`` when unset or unknown."""
    value = load_config().get("log_level")
    if not isinstance(value, str) or not value.strip():
        return None
    name = value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("ignoring unknown log_level %r in %s", value, CONFIG_PATH)
        return None
    return name
