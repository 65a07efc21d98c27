"""Config-driven site builder rendering registered sections to static HTML.

This package exposes the CLI entry points used by ``sdui`` to validate the
site configuration, list registered section types, and render pages.

Exports
-------
- ``app``: Cyclopts application holding the subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sdui_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
