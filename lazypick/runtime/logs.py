"""File-based logging setup.

The terminal is in raw alternate-screen mode while a session runs, so log
records go to a file under the user log directory and never to stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers attached by configure_logging, replaced on each call.
_INSTALLED_HANDLERS: list[logging.Handler] = []


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def _install_handler(package_logger: logging.Logger, handler: logging.Handler) -> None:
    for old in _INSTALLED_HANDLERS:
        package_logger.removeHandler(old)
        old.close()
    _INSTALLED_HANDLERS[:] = [handler]
    package_logger.addHandler(handler)


def configure_logging(level: str | None, path: Path | None = None) -> Path | None:
    """Attach a file handler to the ``lazypick`` logger when ``level`` is set.

    Returns the log file path, or ``None`` when logging stays disabled.
    Unknown level names raise ``ValueError``. A repeated call replaces the
    handler installed by the previous one.
    """
    package_logger = logging.getLogger(APP_NAME)
    if not level:
        _install_handler(package_logger, logging.NullHandler())
        return None

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level!r}")

    target = path or default_log_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _install_handler(package_logger, handler)
    package_logger.setLevel(numeric)
    return target
