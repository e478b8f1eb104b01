"""
Steam package for SteamDesk.

This module provides the data model shared by the readers of a local Steam
installation: installed-app records and the errors raised while reading
library and manifest files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

UNKNOWN_GAME_NAME = "Unknown Game"


class SteamDeskError(Exception):
    """Base class for SteamDesk errors."""


class ConfigNotFoundError(SteamDeskError, FileNotFoundError):
    """Raised when the Steam library configuration file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"libraryfolders.vdf not found at {path}")


class LibraryFoldersError(SteamDeskError):
    """Raised when ``libraryfolders.vdf`` exists but cannot be decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not decode {path}: {reason}")


class ManifestParseError(SteamDeskError):
    """Raised when an app manifest cannot be turned into a record."""


class MissingFieldError(ManifestParseError):
    """Raised when a required field is absent from an app manifest."""

    def __init__(self, field: str, path: Optional[Path] = None):
        self.field = field
        self.path = path
        location = f" in {path}" if path else ""
        super().__init__(f"Failed to find {field}{location}")


@dataclass(frozen=True)
class ManifestRecord:
    """Represents one installed app read from an appmanifest file."""

    app_id: str
    name: str = UNKNOWN_GAME_NAME

    # File the record was parsed from, when known
    manifest_path: Optional[Path] = None
