"""
Configuration file support for SteamDesk.

Loads settings from ``~/.config/steamdesk/config.yaml`` (or
``$XDG_CONFIG_HOME/steamdesk/config.yaml``) and exposes them as a typed
dataclass that the CLI can merge with command-line flags.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger("steamdesk.config")


def default_config_path() -> Path:
    """Return the default configuration file path.

    Uses ``$XDG_CONFIG_HOME/steamdesk/config.yaml`` when set, otherwise
    falls back to ``~/.config/steamdesk/config.yaml``.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "steamdesk" / "config.yaml"
    return Path.home() / ".config" / "steamdesk" / "config.yaml"


def _optional_path(value: Any) -> Optional[Path]:
    if value is None:
        return None
    return Path(str(value)).expanduser()


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    """Read a list of scalars, skipping entries that are not strings or ints."""
    values = data.get(key) or []
    if not isinstance(values, list):
        logger.warning("Ignoring %s: expected a list, got %r", key, values)
        return []

    result: List[str] = []
    for entry in values:
        if isinstance(entry, bool) or not isinstance(entry, (str, int)):
            logger.warning("Skipping invalid %s entry: %s", key, entry)
            continue
        entry = str(entry).strip()
        if entry:
            result.append(entry)
    return result


@dataclass
class SteamdeskConfig:
    """Top-level configuration loaded from the YAML file."""

    steam_path: Optional[Path] = None
    app_dir: Optional[Path] = None
    icon_cache_dir: Optional[Path] = None
    skip_keywords: List[str] = field(default_factory=list)
    ignored_app_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SteamdeskConfig":
        """Construct a ``SteamdeskConfig`` from a parsed YAML dictionary."""
        if not isinstance(data, dict):
            return cls()

        return cls(
            steam_path=_optional_path(data.get("steam_path")),
            app_dir=_optional_path(data.get("app_dir")),
            icon_cache_dir=_optional_path(data.get("icon_cache_dir")),
            skip_keywords=_string_list(data, "skip_keywords"),
            ignored_app_ids=_string_list(data, "ignored_app_ids"),
        )

    @classmethod
    def from_file(cls, path: Path) -> "SteamdeskConfig":
        """Read a YAML file and return a ``SteamdeskConfig``.

        Returns an empty default config on any error.
        """
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f.read())
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (IOError, yaml.YAMLError) as e:
            logger.error("Failed to load config from %s: %s", path, e)
            return cls()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "SteamdeskConfig":
        """Main entry point, load config from *config_path* or the default location.

        Returns an empty config if the file does not exist.
        """
        path = config_path or default_config_path()
        if not path.exists():
            return cls()
        return cls.from_file(path)
