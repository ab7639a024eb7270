"""Order manual pages by the numeric prefix of their filenames."""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from manual_sidebar.pages import Page

NUMERIC_PREFIX_PATTERN = re.compile(r"^(\d+)-")


def order_pages(pages: cabc.Iterable[Page]) -> list[Page]:
    """Return ``pages`` sorted for sidebar display.

    Pages named ``<digits>-...`` come first in ascending integer order, so
    ``9-x`` precedes ``10-y``. Unprefixed pages follow, ordered by base
    filename. The sort is stable: pages with equal keys (``01-a`` and
    ``1-b``, for instance) keep their input order.

    >>> from manual_sidebar.pages import Page
    >>> names = ["10-intro", "2-setup", "readme", "1-start"]
    >>> pages = [Page(path=f"{name}.md", url="") for name in names]
    >>> [page.basename_without_ext for page in order_pages(pages)]
    ['1-start', '2-setup', '10-intro', 'readme']
    """
    return sorted(pages, key=_sort_key)


def numeric_prefix(basename: str) -> int | None:
    """Return the leading ``<digits>-`` number of ``basename``, if any."""
    match = NUMERIC_PREFIX_PATTERN.match(basename)
    if not match:
        return None
    return int(match.group(1))


def _sort_key(page: Page) -> tuple[int, int, str]:
    basename = page.basename_without_ext
    number = numeric_prefix(basename)
    if number is None:
        return (1, 0, basename)
    return (0, number, "")


__all__ = ["NUMERIC_PREFIX_PATTERN", "numeric_prefix", "order_pages"]
