"""Render sidebar entries into HTML include partials."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from manual_sidebar._constants import HTML_FILENAME_TEMPLATE

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

    from .models import Language, SidebarEntry


class SidebarHtmlRenderer:
    """Render ``sidebar.jinja`` once per language."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``sidebar.jinja``. Defaults to the package
            ``templates`` directory when ``None``.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("sidebar.jinja")

    def render(self, lang: Language, entries: cabc.Sequence[SidebarEntry]) -> str:
        """Return the HTML navigation block for ``lang``."""
        return self.template.render(lang=lang.value, entries=entries)

    def write(
        self,
        sidebars: cabc.Mapping[Language, cabc.Sequence[SidebarEntry]],
        out_dir: Path,
    ) -> list[Path]:
        """Write ``sidebar-<lang>.html`` for each sidebar and return the paths."""
        out_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for lang, entries in sidebars.items():
            output_path = out_dir / HTML_FILENAME_TEMPLATE.format(lang=lang.value)
            output_path.write_text(self.render(lang, entries), encoding="utf-8")
            written.append(output_path)
        return written


__all__ = ["SidebarHtmlRenderer"]
