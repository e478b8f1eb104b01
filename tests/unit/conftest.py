"""
Shared fixtures building a fake Steam installation on disk.
"""

from pathlib import Path
from typing import Callable, Optional

import pytest

ICON_NAME = "0123456789abcdef0123456789abcdef01234567.jpg"


def manifest_text(app_id: Optional[str], name: Optional[str] = None) -> str:
    """Return appmanifest contents shaped like the ones Steam writes."""
    lines = ['"AppState"', "{"]
    if app_id is not None:
        lines.append(f'\t"appid"\t\t"{app_id}"')
    lines.append('\t"universe"\t\t"1"')
    if name is not None:
        lines.append(f'\t"name"\t\t"{name}"')
    lines.append('\t"StateFlags"\t\t"4"')
    lines.append(f'\t"installdir"\t\t"{name or "unknown"}"')
    lines.append("}")
    return "\n".join(lines) + "\n"


class SteamTree:
    """Helper to populate a fake Steam root under a temporary directory."""

    def __init__(self, base: Path):
        self.root = base / "Steam"
        self.app_dir = base / "applications"
        self.icon_cache = self.root / "appcache" / "librarycache"
        self.libraries = []

    @property
    def library_vdf(self) -> Path:
        return self.root / "steamapps" / "libraryfolders.vdf"

    def add_library(self, path: Path) -> Path:
        (path / "steamapps").mkdir(parents=True, exist_ok=True)
        self.libraries.append(path)
        self.write_vdf()
        return path

    def write_vdf(self) -> None:
        self.library_vdf.parent.mkdir(parents=True, exist_ok=True)
        blocks = []
        for index, library in enumerate(self.libraries):
            blocks.append(
                f'\t"{index}"\n\t{{\n'
                f'\t\t"path"\t\t"{library}"\n'
                f'\t\t"label"\t\t""\n'
                f'\t\t"apps"\n\t\t{{\n\t\t}}\n'
                f"\t}}\n"
            )
        self.library_vdf.write_text('"libraryfolders"\n{\n' + "".join(blocks) + "}\n")

    def add_manifest(
        self, library: Path, app_id: Optional[str], name: Optional[str] = None
    ) -> Path:
        manifest = library / "steamapps" / f"appmanifest_{app_id or 'broken'}.acf"
        manifest.write_text(manifest_text(app_id, name))
        return manifest

    def add_icon(self, app_id: str, filename: str = ICON_NAME) -> Path:
        icon_dir = self.icon_cache / app_id
        icon_dir.mkdir(parents=True, exist_ok=True)
        icon = icon_dir / filename
        icon.write_bytes(b"\xff\xd8\xff")
        return icon


@pytest.fixture
def steam_tree(tmp_path: Path) -> SteamTree:
    """A Steam root whose main library lives inside the root itself."""
    tree = SteamTree(tmp_path)
    tree.add_library(tree.root)
    return tree


@pytest.fixture
def make_manifest() -> Callable[..., str]:
    return manifest_text
