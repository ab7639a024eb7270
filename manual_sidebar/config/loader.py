"""Load sidebar build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from manual_sidebar.sidebar.models import Language, MatchMode
from manual_sidebar.sidebar.writer import DataFormat

from .helpers import _optional_str, _parse_choice, _parse_languages
from .models import SidebarConfig, SidebarConfigError


def load_sidebar_config(path: Path) -> SidebarConfig:
    """Load the YAML configuration describing where and how sidebars are built.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``sidebar.yaml``).

    Returns
    -------
    SidebarConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SidebarConfigError
        If ``match_mode``, ``data_format``, or ``languages`` hold unsupported
        values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from manual_sidebar.config import load_sidebar_config
    >>> config = load_sidebar_config(Path("sidebar.yaml"))  # doctest: +SKIP
    >>> config.match_mode  # doctest: +SKIP
    <MatchMode.STRICT: 'strict'>
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    defaults = loaded.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise SidebarConfigError(msg)
    return build_sidebar_config(defaults)


def build_sidebar_config(payload: typ.Mapping[str, typ.Any]) -> SidebarConfig:
    """Build a SidebarConfig from a ``defaults`` mapping, filling in gaps."""
    base = SidebarConfig()
    source_dir = _optional_str(payload.get("source_dir"))
    data_dir = _optional_str(payload.get("data_dir"))
    html_output_dir = _optional_str(payload.get("html_output_dir"))

    data_format = base.data_format
    if payload.get("data_format") is not None:
        data_format = _parse_choice(
            payload["data_format"], DataFormat, field="data_format"
        )
    match_mode = base.match_mode
    if payload.get("match_mode") is not None:
        match_mode = _parse_choice(payload["match_mode"], MatchMode, field="match_mode")
    languages = base.languages
    if payload.get("languages") is not None:
        languages = _parse_languages(payload["languages"], Language)

    return SidebarConfig(
        source_dir=Path(source_dir) if source_dir else base.source_dir,
        data_dir=Path(data_dir) if data_dir else base.data_dir,
        data_format=data_format,
        html_output_dir=(
            Path(html_output_dir) if html_output_dir else base.html_output_dir
        ),
        match_mode=match_mode,
        languages=languages,
    )


__all__ = ["build_sidebar_config", "load_sidebar_config"]
