"""Cyclopts CLI entrypoint for building manual sidebars outside a host build.

The ``sidebar`` console script defined here discovers the pages of a site
source tree, builds the English and Japanese manual sidebars, and either
writes them as site data files (``_data/sidebar_en.yml``), renders them into
HTML include partials, or prints them for inspection. Options fall back to
``SIDEBAR_*`` environment variables, then to ``sidebar.yaml`` when given, then
to built-in defaults.

Examples
--------
Write data files for the default site layout:

>>> from manual_sidebar.cli import main
>>> main()  # doctest: +SKIP

Print the Japanese sidebar using the loose path matching:

>>> from manual_sidebar.cli import app
>>> app(["show", "--lang", "ja", "--mode", "loose"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SidebarConfig, load_sidebar_config
from .config.helpers import _parse_choice
from .pages import discover_pages
from .sidebar import (
    DataFormat,
    Language,
    MatchMode,
    SidebarBuilder,
    SidebarHtmlRenderer,
    build_sidebar,
    write_sidebar_data,
)

app = App(name="sidebar", config=cyclopts.config.Env("SIDEBAR_", command=False))  # type: ignore[unknown-argument]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _resolve_config(
    config: Path | None,
    *,
    source_dir: Path | None = None,
    mode: str | None = None,
) -> SidebarConfig:
    """Load ``config`` (or defaults) and apply command-line overrides."""
    site_config = load_sidebar_config(config) if config else SidebarConfig()
    if source_dir:
        site_config = dc.replace(site_config, source_dir=source_dir)
    if mode:
        site_config = dc.replace(
            site_config, match_mode=_parse_choice(mode, MatchMode, field="match_mode")
        )
    return site_config


@app.command(help="Write sidebar_<lang> data files for every language.")
def generate(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to sidebar config")
    ] = None,
    source_dir: typ.Annotated[
        Path | None, Parameter(help="Override the site source directory")
    ] = None,
    data_dir: typ.Annotated[
        Path | None, Parameter(help="Override the data output directory")
    ] = None,
    data_format: typ.Annotated[
        str | None, Parameter(help="Data file format: yml or json")
    ] = None,
    mode: typ.Annotated[
        str | None, Parameter(help="Path matching: strict or loose")
    ] = None,
    verbose: bool = False,
) -> None:
    """Discover pages, build every sidebar, and write the data files.

    Parameters
    ----------
    config : Path or None, optional
        ``sidebar.yaml`` to load; built-in defaults apply when ``None``.
    source_dir : Path or None, optional
        Override the directory scanned for pages.
    data_dir : Path or None, optional
        Override the directory receiving ``sidebar_<lang>`` files.
    data_format : str or None, optional
        ``yml`` or ``json``; overrides the configured format.
    mode : str or None, optional
        ``strict`` or ``loose``; overrides the configured match mode.
    verbose : bool, optional
        Emit per-page selection diagnostics.

    Raises
    ------
    SidebarConfigError
        If ``data_format`` or ``mode`` hold unsupported values.
    """
    _configure_logging(verbose=verbose)
    site_config = _resolve_config(config, source_dir=source_dir, mode=mode)
    fmt = site_config.data_format
    if data_format:
        fmt = _parse_choice(data_format, DataFormat, field="data_format")

    pages = discover_pages(site_config.source_dir)
    builder = SidebarBuilder(
        languages=site_config.languages, mode=site_config.match_mode
    )
    sidebars = builder.run(pages)
    written = write_sidebar_data(sidebars, data_dir or site_config.data_dir, fmt)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Render sidebar-<lang>.html include partials.")
def render(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to sidebar config")
    ] = None,
    source_dir: typ.Annotated[
        Path | None, Parameter(help="Override the site source directory")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the HTML output directory")
    ] = None,
    mode: typ.Annotated[
        str | None, Parameter(help="Path matching: strict or loose")
    ] = None,
    verbose: bool = False,
) -> None:
    """Discover pages, build every sidebar, and write HTML partials."""
    _configure_logging(verbose=verbose)
    site_config = _resolve_config(config, source_dir=source_dir, mode=mode)
    pages = discover_pages(site_config.source_dir)
    builder = SidebarBuilder(
        languages=site_config.languages, mode=site_config.match_mode
    )
    renderer = SidebarHtmlRenderer()
    written = renderer.write(
        builder.run(pages), output_dir or site_config.html_output_dir
    )
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the ordered sidebar for one language.")
def show(
    *,
    lang: typ.Annotated[str, Parameter(help="Language code: en or ja")] = "en",
    config: typ.Annotated[
        Path | None, Parameter(help="Path to sidebar config")
    ] = None,
    source_dir: typ.Annotated[
        Path | None, Parameter(help="Override the site source directory")
    ] = None,
    mode: typ.Annotated[
        str | None, Parameter(help="Path matching: strict or loose")
    ] = None,
    verbose: bool = False,
) -> None:
    """Print ``title -> url`` for each sidebar entry, or ``no entries``."""
    _configure_logging(verbose=verbose)
    site_config = _resolve_config(config, source_dir=source_dir, mode=mode)
    language = _parse_choice(lang, Language, field="language")
    pages = discover_pages(site_config.source_dir)
    entries = build_sidebar(pages, language, mode=site_config.match_mode)
    if not entries:
        print("no entries")
        return
    for entry in entries:
        print(f"{entry.title} -> {entry.url}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``sidebar`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
