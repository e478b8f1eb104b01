"""
SteamDesk - desktop launchers for your installed Steam games.

Scan the Steam libraries, skip the tools, write a launcher per game.
"""

from importlib.metadata import version as _version

__version__ = _version("steamdesk")
