"""
Steam library discovery for SteamDesk.

Reads ``libraryfolders.vdf`` to find every directory Steam installs games into.
"""

import logging
import re
from pathlib import Path
from typing import List

from steamdesk_py.steam import ConfigNotFoundError, LibraryFoldersError

logger = logging.getLogger("steamdesk.steam.library")

_PATH_RE = re.compile(r'"path"\s+"([^"]+)"')


def library_folders_path(steam_root: Path) -> Path:
    """Return the location of ``libraryfolders.vdf`` under *steam_root*."""
    return steam_root / "steamapps" / "libraryfolders.vdf"


def steamapps_dir(library_root: Path) -> Path:
    """Return the app storage directory of a library root."""
    return library_root / "steamapps"


def parse_library_folders(vdf_path: Path) -> List[Path]:
    """
    Collect every library root listed in a ``libraryfolders.vdf`` file.

    Every ``"path"`` entry is returned in file order, whatever block it
    sits in. The roots are not checked for existence.

    Args:
        vdf_path: Path to ``libraryfolders.vdf``

    Returns:
        List of library root directories

    Raises:
        ConfigNotFoundError: If *vdf_path* does not exist.
        LibraryFoldersError: If *vdf_path* is not valid UTF-8.
    """
    if not vdf_path.exists():
        raise ConfigNotFoundError(vdf_path)

    try:
        with open(vdf_path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise LibraryFoldersError(vdf_path, str(e)) from e

    roots = [Path(match) for match in _PATH_RE.findall(content)]
    logger.debug(f"Found {len(roots)} library folders in {vdf_path}")
    return roots
