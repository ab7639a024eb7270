"""Shared value types used by the sidebar pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum

from manual_sidebar._constants import (
    DATA_KEY_TEMPLATE,
    LAYOUT_TEMPLATE,
    MANUAL_DIR_TEMPLATE,
    MANUAL_VERSION,
)


class Language(enum.StrEnum):
    """Languages that carry a localized manual tree."""

    EN = "en"
    JA = "ja"

    @property
    def layout(self) -> str:
        """Return the layout name manual pages in this language must use."""
        return LAYOUT_TEMPLATE.format(lang=self.value)

    @property
    def manual_dir(self) -> str:
        """Return the path fragment identifying this language's manual tree."""
        return MANUAL_DIR_TEMPLATE.format(version=MANUAL_VERSION, lang=self.value)

    @property
    def data_key(self) -> str:
        """Return the site data key the sidebar for this language is stored under."""
        return DATA_KEY_TEMPLATE.format(lang=self.value)


class MatchMode(enum.StrEnum):
    """How strictly a page path must sit inside the manual tree.

    ``STRICT`` accepts only Markdown files that are direct children of the
    language directory and whose layout matches the language. ``LOOSE``
    accepts any path containing the language directory at any depth and skips
    the layout check.
    """

    STRICT = "strict"
    LOOSE = "loose"


@dc.dataclass(frozen=True, slots=True)
class SidebarEntry:
    """Navigation record handed to templates.

    Attributes
    ----------
    title : str
        Page title, emitted verbatim.
    url : str
        Page URL as computed by the site generator.
    permalink : str or None
        Explicit permalink from front matter; ``None`` when the page has none.
    """

    title: str
    url: str
    permalink: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        """Return the mapping form stored in site data and data files."""
        return {"title": self.title, "url": self.url, "permalink": self.permalink}


__all__ = ["Language", "MatchMode", "SidebarEntry"]
