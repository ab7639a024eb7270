"""Select the manual pages that belong in a language's sidebar."""

from __future__ import annotations

import logging
import re
import typing as typ

from manual_sidebar._constants import CONVENTION_SEGMENT, INDEX_SUFFIX, MANUAL_CATEGORY

from .models import Language, MatchMode

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from manual_sidebar.pages import Page

logger = logging.getLogger(__name__)


def select_manual_pages(
    pages: cabc.Iterable[Page],
    lang: Language | str,
    *,
    mode: MatchMode = MatchMode.STRICT,
) -> list[Page]:
    """Return the pages eligible for the ``lang`` sidebar, in input order.

    Parameters
    ----------
    pages : Iterable[Page]
        Every page known to the site.
    lang : Language or str
        Language whose manual tree is wanted. Unsupported codes select nothing.
    mode : MatchMode, optional
        ``STRICT`` (default) requires a direct-child Markdown file and the
        language's layout; ``LOOSE`` only requires the path to contain the
        language's manual directory.

    Returns
    -------
    list[Page]
        Matching pages. Never raises for incomplete metadata; such pages are
        simply left out.
    """
    try:
        language = Language(lang)
    except ValueError:
        logger.warning("No manual tree for unsupported language %r", lang)
        return []

    strict_pattern = _strict_path_pattern(language)
    selected: list[Page] = []
    for page in pages:
        path = _normalize_path(page.path)
        is_manual = page.category == MANUAL_CATEGORY
        if mode is MatchMode.STRICT:
            in_tree = strict_pattern.search(path) is not None
            layout_ok = page.layout == language.layout
        else:
            in_tree = language.manual_dir in path
            layout_ok = True
        included = (
            is_manual
            and in_tree
            and layout_ok
            and not path.endswith(INDEX_SUFFIX)
            and CONVENTION_SEGMENT not in path
            and page.sidebar_visible
            and _has_title(page.title)
        )
        if included:
            logger.debug(
                "Including %s: %s -> %r (layout: %s)",
                language,
                page.path,
                page.title,
                page.layout,
            )
            selected.append(page)
        elif is_manual and in_tree:
            logger.debug(
                "Excluding %s: %s -> %r (layout: %s) - layout_check: %s",
                language,
                page.path,
                page.title,
                page.layout,
                layout_ok,
            )
    logger.debug("Found %d pages for %s", len(selected), language)
    return selected


def _strict_path_pattern(language: Language) -> re.Pattern[str]:
    """Match a Markdown file directly inside the language's manual directory."""
    return re.compile(re.escape(language.manual_dir) + r"[^/]+\.md$")


def _has_title(value: object | None) -> bool:
    """Return whether ``value`` is a usable title; whitespace-only strings count."""
    return bool(value)


def _normalize_path(path: str) -> str:
    """Return ``path`` with a leading slash so root-level trees still match."""
    return path if path.startswith("/") else f"/{path}"


__all__ = ["select_manual_pages"]
