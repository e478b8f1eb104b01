"""
Platform helpers for SteamDesk.

Centralizes the XDG directory lookups so the rest of the codebase
can call simple functions instead of reading environment variables.
"""

import os
import sys
from pathlib import Path


def is_linux() -> bool:
    """Return True when running on Linux."""
    return sys.platform.startswith("linux")


def xdg_data_home() -> Path:
    """Return ``$XDG_DATA_HOME``, falling back to ``~/.local/share``."""
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def default_steam_root() -> Path:
    """Return the default Steam installation directory."""
    return xdg_data_home() / "Steam"


def default_app_dir() -> Path:
    """Return the directory desktop environments read launchers from."""
    return xdg_data_home() / "applications"
