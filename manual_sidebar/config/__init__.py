"""Load and validate sidebar build configuration.

This subpackage parses the project's ``sidebar.yaml`` file, applies defaults
for absent keys, and produces a :class:`SidebarConfig` that the CLI feeds to
page discovery, the sidebar builder, and the output writers.

Examples
--------
>>> from pathlib import Path
>>> from manual_sidebar.config import load_sidebar_config
>>> config = load_sidebar_config(Path("sidebar.yaml"))  # doctest: +SKIP
>>> config.data_dir  # doctest: +SKIP
PosixPath('site/_data')
"""

from .loader import build_sidebar_config, load_sidebar_config
from .models import SidebarConfig, SidebarConfigError

__all__ = [
    "SidebarConfig",
    "SidebarConfigError",
    "build_sidebar_config",
    "load_sidebar_config",
]
