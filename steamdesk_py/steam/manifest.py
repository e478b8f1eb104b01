"""
App manifest reading for SteamDesk.

Pulls the app id and name out of Steam's ``appmanifest_*.acf`` files.
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from steamdesk_py.steam import (
    UNKNOWN_GAME_NAME,
    ManifestParseError,
    ManifestRecord,
    MissingFieldError,
)

MANIFEST_PREFIX = "appmanifest_"
MANIFEST_SUFFIX = ".acf"

# The KeyValues tree is not parsed. The first match wins wherever it is nested.
_APPID_RE = re.compile(r'"appid"\s+"(\d+)"')
_NAME_RE = re.compile(r'"name"\s+"([^"]+)"')


def is_manifest_filename(filename: str) -> bool:
    """Return True for ``appmanifest_*.acf`` file names."""
    return filename.startswith(MANIFEST_PREFIX) and filename.endswith(MANIFEST_SUFFIX)


def parse_app_manifest(
    text: str, manifest_path: Optional[Path] = None
) -> ManifestRecord:
    """
    Extract the app id and name from the text of an appmanifest file.

    Args:
        text: Raw manifest contents
        manifest_path: File the text was read from, kept on the record

    Returns:
        The parsed record. ``name`` falls back to "Unknown Game".

    Raises:
        MissingFieldError: If no ``"appid"`` entry is present.
    """
    appid_match = _APPID_RE.search(text)
    if appid_match is None:
        raise MissingFieldError("appid", manifest_path)

    name_match = _NAME_RE.search(text)
    name = name_match.group(1) if name_match else UNKNOWN_GAME_NAME

    return ManifestRecord(
        app_id=appid_match.group(1), name=name, manifest_path=manifest_path
    )


def read_app_manifest(path: Path) -> ManifestRecord:
    """Read and parse a single appmanifest file.

    A file that cannot be read or decoded is reported the same way as one
    missing its app id, so callers only have to handle ManifestParseError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(f"Could not read {path}: {e}") from e
    return parse_app_manifest(text, manifest_path=path)


def iter_manifest_paths(steamapps_dir: Path) -> Iterator[Path]:
    """Yield the appmanifest files of a ``steamapps`` directory in name order.

    Errors listing the directory propagate to the caller.
    """
    for entry in sorted(steamapps_dir.iterdir()):
        if is_manifest_filename(entry.name):
            yield entry
