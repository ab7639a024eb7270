"""Build per-language manual sidebars for a documentation site.

This package selects the "Manual" pages of each localized manual tree,
orders them by their numeric filename prefix, and emits ``{title, url,
permalink}`` records for navigation templates. It exposes the pipeline for
host site generators and a CLI used by ``uv run sidebar``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_sidebar``: Pure pipeline for one language.
- ``Page``: Read-only page view the pipeline consumes.

Examples
--------
>>> from manual_sidebar import Page, build_sidebar
>>> build_sidebar([], "en")
[]
"""

from __future__ import annotations

from .cli import app, main
from .pages import Page, discover_pages
from .sidebar import SidebarGenerator, build_sidebar, register_filters

__all__ = [
    "Page",
    "SidebarGenerator",
    "app",
    "build_sidebar",
    "discover_pages",
    "main",
    "register_filters",
]
