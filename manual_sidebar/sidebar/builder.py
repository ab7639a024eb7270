"""Run the sidebar pipeline and publish its results into site data.

:func:`build_sidebar` is the pure pipeline for one language: select the
manual pages, order them by filename prefix, and project them into
:class:`~manual_sidebar.sidebar.models.SidebarEntry` records.
:class:`SidebarBuilder` repeats that for each configured language, and
:class:`SidebarGenerator` is the site-generator hook that stores the results
under ``sidebar_<lang>`` keys of the host's data registry.

Example
-------
>>> from manual_sidebar.pages import Page
>>> from manual_sidebar.sidebar.builder import build_sidebar
>>> page = Page(
...     path="manuals/1.0/en/01-intro.md",
...     url="/manuals/1.0/en/01-intro.html",
...     data={"category": "Manual", "layout": "docs-en", "title": "Intro"},
... )
>>> [entry.title for entry in build_sidebar([page], "en")]
['Intro']
"""

from __future__ import annotations

import logging
import typing as typ

from .models import Language, MatchMode, SidebarEntry
from .ordering import order_pages
from .projector import project_entries
from .selector import select_manual_pages

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from manual_sidebar.pages import Page

logger = logging.getLogger(__name__)

Sidebars = dict[Language, list[SidebarEntry]]


class SiteLike(typ.Protocol):
    """Host site exposing its page collection and a mutable data registry."""

    @property
    def pages(self) -> cabc.Sequence[Page]: ...

    @property
    def data(self) -> cabc.MutableMapping[str, typ.Any]: ...


def build_sidebar(
    pages: cabc.Iterable[Page],
    lang: Language | str,
    *,
    mode: MatchMode = MatchMode.STRICT,
) -> list[SidebarEntry]:
    """Return the ordered sidebar entries for ``lang``."""
    selected = select_manual_pages(pages, lang, mode=mode)
    return project_entries(order_pages(selected))


class SidebarBuilder:
    """Build independent sidebars for every configured language."""

    def __init__(
        self,
        *,
        languages: cabc.Iterable[Language] = tuple(Language),
        mode: MatchMode = MatchMode.STRICT,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        languages : Iterable[Language], optional
            Languages to build, in order. Defaults to every supported language.
        mode : MatchMode, optional
            Path matching strictness passed to the selector.
        """
        self.languages = tuple(languages)
        self.mode = mode

    def run(self, pages: cabc.Sequence[Page]) -> Sidebars:
        """Return a fresh mapping of language to sidebar entries."""
        sidebars: Sidebars = {}
        for lang in self.languages:
            logger.debug("Generating sidebar for %s from %d pages", lang, len(pages))
            sidebars[lang] = build_sidebar(pages, lang, mode=self.mode)
        return sidebars


def attach_sidebar_data(
    site_data: cabc.MutableMapping[str, typ.Any], sidebars: Sidebars
) -> None:
    """Store each sidebar under its ``sidebar_<lang>`` key as plain mappings."""
    for lang, entries in sidebars.items():
        site_data[lang.data_key] = [entry.as_dict() for entry in entries]
        logger.info("Stored %d items for %s", len(entries), lang.data_key)


class SidebarGenerator:
    """Site-generator hook populating ``site.data`` with per-language sidebars.

    The hook runs before rendering so templates can read
    ``site.data["sidebar_en"]`` and ``site.data["sidebar_ja"]``.
    """

    def __init__(self, builder: SidebarBuilder | None = None) -> None:
        self.builder = builder or SidebarBuilder()

    def generate(self, site: SiteLike) -> Sidebars:
        """Build sidebars from ``site.pages`` and attach them to ``site.data``."""
        logger.debug("Starting sidebar generation")
        sidebars = self.builder.run(site.pages)
        attach_sidebar_data(site.data, sidebars)
        logger.debug("Sidebar generation complete")
        return sidebars


__all__ = [
    "SidebarBuilder",
    "SidebarGenerator",
    "Sidebars",
    "SiteLike",
    "attach_sidebar_data",
    "build_sidebar",
]
