"""
Icon lookup for SteamDesk.

Finds a game's artwork in Steam's library cache, falling back to the
generic ``steam`` icon.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger("steamdesk.steam.icons")

FALLBACK_ICON = "steam"

# Steam names cached artwork after a 40 character hash. This is an
# observed convention of the client, not a documented one. The length is
# counted in encoded bytes.
ICON_FILENAME_LENGTH = 44
ICON_EXTENSION = ".jpg"


def icon_cache_path(steam_root: Path) -> Path:
    """Return the library artwork cache directory under *steam_root*."""
    return steam_root / "appcache" / "librarycache"


def is_icon_candidate(filename: str) -> bool:
    """Return True if *filename* looks like a cached ``<hash>.jpg`` icon."""
    size = len(os.fsencode(filename))
    return size == ICON_FILENAME_LENGTH and filename.endswith(ICON_EXTENSION)


def resolve_icon(icon_cache_dir: Path, app_id: str) -> str:
    """
    Find the cached icon for an app.

    Args:
        icon_cache_dir: Steam's ``appcache/librarycache`` directory
        app_id: App whose subdirectory is searched

    Returns:
        Path of the first matching image, or ``"steam"`` when the
        directory is missing, unreadable or has no candidate.
    """
    app_cache = icon_cache_dir / app_id
    try:
        entries = sorted(app_cache.iterdir())
    except OSError as e:
        logger.debug(f"No icon cache for {app_id}: {e}")
        return FALLBACK_ICON

    for entry in entries:
        if is_icon_candidate(entry.name):
            return str(entry)

    logger.debug(f"No icon candidate in {app_cache}, using {FALLBACK_ICON}")
    return FALLBACK_ICON
