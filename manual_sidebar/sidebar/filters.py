"""Template filters exposing the sidebar pipeline to Jinja templates.

Templates can call the pipeline inline instead of reading site data::

    {% for item in pages | sidebar_pages("ja") %}
      <a href="{{ item.url }}">{{ item.title }}</a>
    {% endfor %}
"""

from __future__ import annotations

import functools
import typing as typ

from .builder import build_sidebar
from .models import Language, MatchMode

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from jinja2 import Environment

    from manual_sidebar.pages import Page


def sidebar_pages(
    pages: cabc.Iterable[Page],
    lang: Language | str,
    *,
    mode: MatchMode = MatchMode.STRICT,
) -> list[dict[str, str | None]]:
    """Return the ordered ``{title, url, permalink}`` mappings for ``lang``."""
    return [entry.as_dict() for entry in build_sidebar(pages, lang, mode=mode)]


def register_filters(
    env: Environment, *, mode: MatchMode = MatchMode.STRICT
) -> Environment:
    """Install ``sidebar_pages`` on ``env`` and return the environment."""
    env.filters["sidebar_pages"] = functools.partial(sidebar_pages, mode=mode)
    return env


__all__ = ["register_filters", "sidebar_pages"]
