"""
Launcher synchronization for SteamDesk.

This module ties the Steam readers, the game filter and the desktop entry
writer together into a single pass over every Steam library.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Set

from steamdesk_py.desktop import cleanup_desktop_entries, write_desktop_entry
from steamdesk_py.filters import Decision, FilterPolicy
from steamdesk_py.platform import default_app_dir, default_steam_root
from steamdesk_py.steam import ManifestParseError, ManifestRecord
from steamdesk_py.steam.icons import icon_cache_path, resolve_icon
from steamdesk_py.steam.library import (
    library_folders_path,
    parse_library_folders,
    steamapps_dir,
)
from steamdesk_py.steam.manifest import iter_manifest_paths, read_app_manifest

logger = logging.getLogger("steamdesk.sync")


@dataclass
class SyncPaths:
    """Directories a sync run reads from and writes to."""

    steam_root: Path
    app_dir: Path
    icon_cache_dir: Path

    @property
    def library_vdf(self) -> Path:
        return library_folders_path(self.steam_root)

    @classmethod
    def resolve(
        cls,
        steam_root: Optional[Path] = None,
        app_dir: Optional[Path] = None,
        icon_cache_dir: Optional[Path] = None,
    ) -> "SyncPaths":
        """Fill in platform defaults for any directory not given."""
        root = steam_root or default_steam_root()
        return cls(
            steam_root=root,
            app_dir=app_dir or default_app_dir(),
            icon_cache_dir=icon_cache_dir or icon_cache_path(root),
        )


@dataclass
class DiscoveredGame:
    """A game that passed the filter, with the icon chosen for it."""

    record: ManifestRecord
    icon: str
    desktop_path: Optional[Path] = None


@dataclass
class SyncReport:
    """Counters and results of one sync run."""

    dry_run: bool = False
    created: int = 0
    skipped: int = 0
    failed: int = 0
    games: List[DiscoveredGame] = field(default_factory=list)
    skipped_games: List[ManifestRecord] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)
    elapsed_ms: float = 0.0


def _scan_libraries(
    paths: SyncPaths, policy: FilterPolicy, report: SyncReport, level: int
) -> Iterator[DiscoveredGame]:
    """
    Yield every accepted game across all libraries.

    Skipped and unparseable manifests are counted on *report*. Progress
    is logged at *level*.
    """
    libraries = parse_library_folders(paths.library_vdf)

    seen_ids: Set[str] = set()
    for library_root in libraries:
        steamapps = steamapps_dir(library_root)
        if not steamapps.exists():
            logger.debug(f"Skipping library without steamapps: {library_root}")
            continue

        logger.log(level, f"Checking Library: {library_root}")

        for manifest_path in iter_manifest_paths(steamapps):
            try:
                record = read_app_manifest(manifest_path)
            except ManifestParseError as e:
                logger.debug(f"Skipping unreadable manifest {manifest_path}: {e}")
                report.failed += 1
                continue

            if policy.classify(record) is Decision.SUPPRESS:
                logger.log(level, f"  Found Tool/Runtime, skipping: {record.name}")
                report.skipped += 1
                report.skipped_games.append(record)
                continue

            if record.app_id in seen_ids:
                logger.warning(
                    f"  App {record.app_id} is installed in more than one "
                    f"library, the launcher for {record.name} replaces it"
                )
            seen_ids.add(record.app_id)

            icon = resolve_icon(paths.icon_cache_dir, record.app_id)
            yield DiscoveredGame(record=record, icon=icon)


def run_sync(
    paths: SyncPaths, policy: FilterPolicy, dry_run: bool = False
) -> SyncReport:
    """
    Rebuild the Steam launchers in ``paths.app_dir``.

    Old launchers are removed first, then one launcher is written for
    every accepted game in every library. In dry-run mode nothing is
    removed or written but the counters are computed the same way.

    Args:
        paths: Steam root, applications directory and icon cache
        policy: Ignored ids and skip keywords
        dry_run: Discover and report only

    Returns:
        SyncReport with the created/skipped/failed counts

    Raises:
        ConfigNotFoundError: If ``libraryfolders.vdf`` is missing.
        LibraryFoldersError: If ``libraryfolders.vdf`` cannot be decoded.
        OSError: On any failure listing a library or writing a launcher.
    """
    start_time = time.monotonic()
    report = SyncReport(dry_run=dry_run)

    logger.info(f"Steam Root Directory: {paths.steam_root}")
    logger.info(f"Desktop Entry Directory: {paths.app_dir}")
    logger.info(f"Icon Cache Directory: {paths.icon_cache_dir}")

    if dry_run:
        logger.info("DRY RUN ENABLED - No files will be written.")
    else:
        logger.info("Cleaning up old Steam desktop entries...")
        report.removed = cleanup_desktop_entries(paths.app_dir)

    for game in _scan_libraries(paths, policy, report, logging.INFO):
        record = game.record
        if dry_run:
            logger.info(f"  Found game: {record.name} (AppID: {record.app_id})")
        else:
            game.desktop_path = write_desktop_entry(paths.app_dir, record, game.icon)
            logger.info(f"  Created Launcher for {record.name}")

        report.games.append(game)
        report.created += 1

    report.elapsed_ms = (time.monotonic() - start_time) * 1000
    if report.failed:
        logger.warning(f"{report.failed} manifests could not be parsed")
    return report


def discover_games(paths: SyncPaths, policy: FilterPolicy) -> SyncReport:
    """
    Scan every library without touching the applications directory.

    Counts match a dry run of run_sync. Progress is only logged at debug
    level so the caller owns what gets printed.
    """
    start_time = time.monotonic()
    report = SyncReport(dry_run=True)

    logger.debug(f"Discovering games under {paths.steam_root}")
    for game in _scan_libraries(paths, policy, report, logging.DEBUG):
        record = game.record
        logger.debug(f"  Found game: {record.name} (AppID: {record.app_id})")
        report.games.append(game)
        report.created += 1

    report.elapsed_ms = (time.monotonic() - start_time) * 1000
    if report.failed:
        logger.warning(f"{report.failed} manifests could not be parsed")
    return report


def clean(app_dir: Path) -> List[Path]:
    """Remove every generated launcher from *app_dir*."""
    logger.info(f"Removing Steam desktop entries from {app_dir}...")
    return cleanup_desktop_entries(app_dir)
