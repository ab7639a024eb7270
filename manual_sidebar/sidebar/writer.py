"""Persist sidebars as site data files (``_data/sidebar_<lang>.yml``).

Static site generators load files from their data directory into the same
registry :func:`~manual_sidebar.sidebar.builder.attach_sidebar_data` writes
to, so exporting the sidebars this way lets a host build that cannot run
Python plugins still read ``site.data.sidebar_en``.
"""

from __future__ import annotations

import enum
import json
import typing as typ

from ruamel.yaml import YAML

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc
    from pathlib import Path

    from .models import Language, SidebarEntry


class DataFormat(enum.StrEnum):
    """Serialization format of written data files."""

    YAML = "yml"
    JSON = "json"


def write_sidebar_data(
    sidebars: cabc.Mapping[Language, cabc.Sequence[SidebarEntry]],
    data_dir: Path,
    fmt: DataFormat = DataFormat.YAML,
) -> list[Path]:
    """Write one data file per language and return the written paths.

    Parameters
    ----------
    sidebars : Mapping[Language, Sequence[SidebarEntry]]
        Sidebars keyed by language, as produced by ``SidebarBuilder.run``.
    data_dir : Path
        Destination directory; created when missing.
    fmt : DataFormat, optional
        ``yml`` (default) or ``json``.

    Returns
    -------
    list[Path]
        ``<data_dir>/sidebar_<lang>.<fmt>`` for each language, in input order.
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for lang, entries in sidebars.items():
        payload = [entry.as_dict() for entry in entries]
        path = data_dir / f"{lang.data_key}.{fmt.value}"
        if fmt is DataFormat.JSON:
            text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
            path.write_text(text, encoding="utf-8")
        else:
            with path.open("w", encoding="utf-8") as handle:
                _build_yaml().dump(payload, handle)
        written.append(path)
    return written


def _build_yaml() -> YAML:
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


__all__ = ["DataFormat", "write_sidebar_data"]
