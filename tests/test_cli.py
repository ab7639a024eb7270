"""Tests for the ``sidebar`` CLI commands.

The command functions are called directly so that no process exit is
involved; discovery runs against a small site tree built in ``tmp_path``.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest
from ruamel.yaml import YAML

from manual_sidebar import cli
from manual_sidebar.config import SidebarConfigError
from manual_sidebar.sidebar import DataFormat, Language

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


def _write_site(root: Path) -> Path:
    source = root / "site"
    files = {
        "manuals/1.0/en/02-setup.md": ("Setup", "docs-en"),
        "manuals/1.0/en/01-intro.md": ("Intro", "docs-en"),
        "manuals/1.0/en/extra/03-more.md": ("More", "docs-en"),
        "manuals/1.0/ja/01-intro.md": ("はじめに", "docs-ja"),
    }
    for rel_path, (title, layout) in files.items():
        path = source / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            f"---\ntitle: {title}\ncategory: Manual\nlayout: {layout}\n---\n",
            encoding="utf-8",
        )
    return source


def test_generate_writes_data_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``generate`` writes one data file per language and reports each path."""
    source = _write_site(tmp_path)
    data_dir = tmp_path / "_data"
    cli.generate(source_dir=source, data_dir=data_dir)

    out = capsys.readouterr().out
    assert "sidebar_en.yml" in out and "sidebar_ja.yml" in out
    loaded = YAML(typ="safe").load((data_dir / "sidebar_en.yml").read_text("utf-8"))
    assert [item["title"] for item in loaded] == ["Intro", "Setup"]


def test_generate_reads_config_file(tmp_path: Path) -> None:
    """Options come from ``sidebar.yaml`` when not overridden."""
    source = _write_site(tmp_path)
    data_dir = tmp_path / "data"
    config_path = tmp_path / "sidebar.yaml"
    config_path.write_text(
        dedent(
            f"""
            defaults:
              source_dir: {source}
              data_dir: {data_dir}
              data_format: json
              match_mode: loose
              languages: [en]
            """
        ).lstrip(),
        encoding="utf-8",
    )
    cli.generate(config=config_path)
    assert sorted(path.name for path in data_dir.iterdir()) == ["sidebar_en.json"]
    text = (data_dir / "sidebar_en.json").read_text(encoding="utf-8")
    assert '"More"' in text, "expected loose mode to include the nested page"


def test_generate_rejects_unknown_format(tmp_path: Path) -> None:
    source = _write_site(tmp_path)
    with pytest.raises(SidebarConfigError):
        cli.generate(source_dir=source, data_dir=tmp_path, data_format="xml")


def test_render_writes_partials(tmp_path: Path) -> None:
    """``render`` writes ``sidebar-<lang>.html`` into the output directory."""
    source = _write_site(tmp_path)
    out_dir = tmp_path / "_includes"
    cli.render(source_dir=source, output_dir=out_dir)
    html = (out_dir / "sidebar-ja.html").read_text(encoding="utf-8")
    assert "はじめに" in html


def test_show_prints_entries(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``show`` prints one ``title -> url`` line per entry."""
    source = _write_site(tmp_path)
    cli.show(lang="en", source_dir=source)
    assert capsys.readouterr().out.splitlines() == [
        "Intro -> /manuals/1.0/en/01-intro.html",
        "Setup -> /manuals/1.0/en/02-setup.html",
    ]


def test_show_reports_empty_sidebar(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "empty"
    source.mkdir()
    cli.show(lang="ja", source_dir=source)
    assert capsys.readouterr().out.strip() == "no entries"


def test_show_rejects_unknown_language(tmp_path: Path) -> None:
    source = _write_site(tmp_path)
    with pytest.raises(SidebarConfigError):
        cli.show(lang="fr", source_dir=source)


def test_generate_hands_overrides_to_writer(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    """Command-line overrides reach the data writer unchanged."""
    source = _write_site(tmp_path)
    writer = mocker.patch.object(cli, "write_sidebar_data", return_value=[])
    cli.generate(source_dir=source, data_dir=tmp_path / "out", data_format="JSON")

    writer.assert_called_once()
    sidebars, data_dir, fmt = writer.call_args.args
    assert data_dir == tmp_path / "out"
    assert fmt is DataFormat.JSON
    assert list(sidebars) == [Language.EN, Language.JA], (
        "expected both default languages to be built"
    )
