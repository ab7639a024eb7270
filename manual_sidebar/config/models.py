"""Typed dataclasses describing sidebar build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from manual_sidebar.sidebar.models import Language, MatchMode
from manual_sidebar.sidebar.writer import DataFormat


class SidebarConfigError(ValueError):
    """Raised when the sidebar configuration is invalid."""


@dc.dataclass(slots=True)
class SidebarConfig:
    """Locations and options for a sidebar build.

    Attributes
    ----------
    source_dir : Path
        Site source tree scanned for pages.
    data_dir : Path
        Directory receiving ``sidebar_<lang>`` data files.
    data_format : DataFormat
        Serialization used for data files.
    html_output_dir : Path
        Directory receiving ``sidebar-<lang>.html`` partials.
    match_mode : MatchMode
        Path matching strictness for page selection.
    languages : tuple[Language, ...]
        Languages to build, in order.
    """

    source_dir: Path = Path("site")
    data_dir: Path = Path("site/_data")
    data_format: DataFormat = DataFormat.YAML
    html_output_dir: Path = Path("site/_includes")
    match_mode: MatchMode = MatchMode.STRICT
    languages: tuple[Language, ...] = tuple(Language)


__all__ = ["SidebarConfig", "SidebarConfigError"]
