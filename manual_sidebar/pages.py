r"""Discover site pages and expose the metadata the sidebar reads.

The sidebar pipeline consumes :class:`Page` objects, a read-only view of one
source document: its site-relative ``path``, its rendered ``url``, and the
front-matter ``data`` mapping. Host site generators can build these directly;
:func:`discover_pages` provides a small stand-in that walks a source tree,
splits YAML front matter from each Markdown file, and computes Jekyll-style
URLs so the CLI can run without a host build.

Example
-------
>>> from manual_sidebar.pages import Page
>>> page = Page(path="manuals/1.0/en/01-intro.md", url="/manuals/1.0/en/01-intro.html",
...             data={"title": "Intro"})
>>> page.basename_without_ext
'01-intro'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE
)
MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


@dc.dataclass(frozen=True, slots=True)
class Page:
    """Read-only view of a site page.

    Attributes
    ----------
    path : str
        Site-relative POSIX path of the source file.
    url : str
        URL the page is published under.
    data : Mapping[str, Any]
        Front-matter values; keys the sidebar reads are ``category``,
        ``layout``, ``title``, ``sidebar`` and ``permalink``.
    """

    path: str
    url: str
    data: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def category(self) -> typ.Any:
        return self.data.get("category")

    @property
    def layout(self) -> typ.Any:
        return self.data.get("layout")

    @property
    def title(self) -> typ.Any:
        return self.data.get("title")

    @property
    def permalink(self) -> typ.Any:
        return self.data.get("permalink")

    @property
    def sidebar_visible(self) -> bool:
        """Return ``False`` only when front matter sets ``sidebar: false``."""
        return self.data.get("sidebar") is not False

    @property
    def basename_without_ext(self) -> str:
        return PurePosixPath(self.path).stem


def discover_pages(source_dir: Path) -> list[Page]:
    """Collect every Markdown page with front matter beneath ``source_dir``.

    Parameters
    ----------
    source_dir : Path
        Root of the site source tree.

    Returns
    -------
    list[Page]
        Pages sorted by path. Files without a front-matter block are treated
        as static files and skipped, as are directories whose names start
        with ``_`` or ``.``.

    Raises
    ------
    FileNotFoundError
        If ``source_dir`` does not exist.
    """
    if not source_dir.is_dir():
        msg = f"Source directory '{source_dir}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    pages: list[Page] = []
    for file_path in sorted(source_dir.rglob("*")):
        if file_path.suffix.lower() not in MARKDOWN_SUFFIXES or not file_path.is_file():
            continue
        relative = file_path.relative_to(source_dir)
        if any(_is_hidden_segment(part) for part in relative.parts[:-1]):
            continue
        data = _read_front_matter(file_path, loader)
        if data is None:
            continue
        rel_posix = relative.as_posix()
        pages.append(Page(path=rel_posix, url=page_url(rel_posix, data), data=data))
    logger.info("Discovered %d pages under %s", len(pages), source_dir)
    return pages


def page_url(rel_path: str, data: cabc.Mapping[str, typ.Any]) -> str:
    """Return the published URL for a page at ``rel_path``.

    An explicit ``permalink`` wins. Otherwise the Markdown suffix becomes
    ``.html`` and ``index`` documents collapse to their directory URL.

    >>> page_url("manuals/1.0/en/01-intro.md", {})
    '/manuals/1.0/en/01-intro.html'
    >>> page_url("manuals/1.0/en/index.md", {})
    '/manuals/1.0/en/'
    """
    permalink = data.get("permalink")
    if isinstance(permalink, str) and permalink.strip():
        return permalink.strip()
    pure = PurePosixPath(rel_path)
    if pure.stem == "index":
        parent = pure.parent.as_posix()
        return "/" if parent == "." else f"/{parent}/"
    return "/" + pure.with_suffix(".html").as_posix()


def _is_hidden_segment(name: str) -> bool:
    return name.startswith(("_", "."))


def _read_front_matter(path: Path, loader: YAML) -> dict[str, typ.Any] | None:
    """Return front-matter data, ``{}`` when unparsable, or ``None`` when absent."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        logger.warning("Ignoring undecodable page %s: %s", path, exc)
        return {}
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return None
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        logger.warning("Ignoring malformed front matter in %s: %s", path, exc)
        return {}
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        logger.warning("Ignoring non-mapping front matter in %s", path)
        return {}
    return dict(loaded)


__all__ = ["Page", "discover_pages", "page_url"]
