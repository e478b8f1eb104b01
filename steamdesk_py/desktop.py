"""
Desktop entry output for SteamDesk.

Writes one freedesktop ``.desktop`` launcher per game and removes the
launchers left over from earlier runs.
"""

import logging
from pathlib import Path
from typing import List

from steamdesk_py.steam import ManifestRecord

logger = logging.getLogger("steamdesk.desktop")

DESKTOP_PREFIX = "steam-"
DESKTOP_SUFFIX = ".desktop"
LAUNCH_SCHEME = "steam"

DESKTOP_TEMPLATE = (
    "[Desktop Entry]\n"
    "Name={name}\n"
    "Exec=steam {scheme}://rungameid/{app_id}\n"
    "Icon={icon}\n"
    "Terminal=false\n"
    "Type=Application\n"
    "Categories=Game;\n"
)


def desktop_filename(app_id: str) -> str:
    """Return the launcher file name for *app_id*."""
    return f"{DESKTOP_PREFIX}{app_id}{DESKTOP_SUFFIX}"


def is_generated_entry(filename: str) -> bool:
    """Return True if *filename* follows the naming used for generated launchers."""
    return filename.startswith(DESKTOP_PREFIX) and filename.endswith(DESKTOP_SUFFIX)


def render_desktop_entry(record: ManifestRecord, icon: str) -> str:
    """Render the launcher contents for a game."""
    return DESKTOP_TEMPLATE.format(
        name=record.name, scheme=LAUNCH_SCHEME, app_id=record.app_id, icon=icon
    )


def cleanup_desktop_entries(app_dir: Path) -> List[Path]:
    """
    Remove every previously generated launcher from *app_dir*.

    The directory is created if it does not exist. Files not matching
    ``steam-*.desktop`` are left alone.

    Args:
        app_dir: Applications directory holding the launchers

    Returns:
        The paths that were deleted
    """
    app_dir.mkdir(parents=True, exist_ok=True)

    removed: List[Path] = []
    for entry in sorted(app_dir.iterdir()):
        if is_generated_entry(entry.name):
            entry.unlink()
            removed.append(entry)

    logger.debug(f"Removed {len(removed)} old desktop entries from {app_dir}")
    return removed


def write_desktop_entry(app_dir: Path, record: ManifestRecord, icon: str) -> Path:
    """
    Write the launcher for *record*, replacing any file of the same name.

    Errors are not caught; a failed write aborts the run.
    """
    path = app_dir / desktop_filename(record.app_id)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_desktop_entry(record, icon))
    return path
