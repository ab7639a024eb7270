"""Select, order, and project manual pages into per-language sidebars."""

from .builder import (
    SidebarBuilder,
    SidebarGenerator,
    attach_sidebar_data,
    build_sidebar,
)
from .filters import register_filters, sidebar_pages
from .models import Language, MatchMode, SidebarEntry
from .ordering import order_pages
from .projector import project_entries
from .renderer import SidebarHtmlRenderer
from .selector import select_manual_pages
from .writer import DataFormat, write_sidebar_data

__all__ = [
    "DataFormat",
    "Language",
    "MatchMode",
    "SidebarBuilder",
    "SidebarEntry",
    "SidebarGenerator",
    "SidebarHtmlRenderer",
    "attach_sidebar_data",
    "build_sidebar",
    "order_pages",
    "project_entries",
    "register_filters",
    "select_manual_pages",
    "sidebar_pages",
    "write_sidebar_data",
]
