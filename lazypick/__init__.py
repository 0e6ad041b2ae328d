"""Public package surface for lazypick.

Exports ``main`` for programmatic CLI invocation. The pickers themselves live
in ``lazypick.selector``, ``lazypick.dual_pane`` and ``lazypick.explorer``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
