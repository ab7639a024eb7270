"""Project ordered pages into sidebar entries."""

from __future__ import annotations

import typing as typ

from .models import SidebarEntry

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from manual_sidebar.pages import Page


def project_entries(pages: cabc.Iterable[Page]) -> list[SidebarEntry]:
    """Return one :class:`SidebarEntry` per page, copying fields verbatim.

    A page without a permalink yields ``permalink=None``; no defaulting,
    truncation, or escaping happens here.
    """
    return [
        SidebarEntry(title=page.title, url=page.url, permalink=page.permalink)
        for page in pages
    ]


__all__ = ["project_entries"]
