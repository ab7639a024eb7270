"""Tests for sidebar data files and HTML partials."""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
from bs4 import BeautifulSoup
from ruamel.yaml import YAML

from manual_sidebar.sidebar import (
    DataFormat,
    Language,
    SidebarEntry,
    SidebarHtmlRenderer,
    write_sidebar_data,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

SIDEBARS = {
    Language.EN: [
        SidebarEntry("Intro", "/manuals/1.0/en/01-intro.html"),
        SidebarEntry("Setup & <Install>", "/setup/", permalink="/setup/"),
    ],
    Language.JA: [],
}


def test_writes_yaml_data_files(tmp_path: Path) -> None:
    """Each language gets a ``sidebar_<lang>.yml`` file with its entries."""
    written = write_sidebar_data(SIDEBARS, tmp_path / "_data")
    assert [path.name for path in written] == ["sidebar_en.yml", "sidebar_ja.yml"]
    loaded = YAML(typ="safe").load(written[0].read_text(encoding="utf-8"))
    assert loaded == [
        {"title": "Intro", "url": "/manuals/1.0/en/01-intro.html", "permalink": None},
        {"title": "Setup & <Install>", "url": "/setup/", "permalink": "/setup/"},
    ]
    assert YAML(typ="safe").load(written[1].read_text(encoding="utf-8")) == []


def test_writes_json_data_files(tmp_path: Path) -> None:
    """JSON output mirrors the YAML payload."""
    written = write_sidebar_data(SIDEBARS, tmp_path, DataFormat.JSON)
    assert [path.name for path in written] == ["sidebar_en.json", "sidebar_ja.json"]
    payload = msgspec_json.decode(written[0].read_bytes())
    assert payload[1] == {
        "title": "Setup & <Install>",
        "url": "/setup/",
        "permalink": "/setup/",
    }
    assert msgspec_json.decode(written[1].read_bytes()) == []


def test_renders_html_partials(tmp_path: Path) -> None:
    """HTML partials list links in order and escape titles."""
    written = SidebarHtmlRenderer().write(SIDEBARS, tmp_path / "_includes")
    assert [path.name for path in written] == ["sidebar-en.html", "sidebar-ja.html"]

    soup = BeautifulSoup(written[0].read_text(encoding="utf-8"), "html.parser")
    nav = soup.select_one("nav.manual-sidebar")
    assert nav is not None, "expected a manual-sidebar nav element"
    assert nav.get("data-lang") == "en"
    links = soup.select("a.manual-sidebar__link")
    assert [link.get_text() for link in links] == ["Intro", "Setup & <Install>"]
    assert [link.get("href") for link in links] == [
        "/manuals/1.0/en/01-intro.html",
        "/setup/",
    ]
    assert links[0].get("data-permalink") is None
    assert links[1].get("data-permalink") == "/setup/"
    assert "<Install>" not in written[0].read_text(encoding="utf-8"), (
        "expected titles to be HTML-escaped"
    )


def test_empty_sidebar_renders_bare_nav() -> None:
    """An empty sidebar still renders the nav without a list."""
    html = SidebarHtmlRenderer().render(Language.JA, [])
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select_one("nav.manual-sidebar[data-lang='ja']") is not None
    assert soup.select("li") == []
