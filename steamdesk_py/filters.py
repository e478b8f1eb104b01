"""
Game filtering for SteamDesk.

This module decides which installed Steam apps are games worth a launcher
and which are tools, runtimes or other non-game content to be skipped.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, List, Optional

from steamdesk_py.steam import ManifestRecord

logger = logging.getLogger("steamdesk.filters")

DEFAULT_SKIP_KEYWORDS: List[str] = [
    "Proton",
    "Steam Linux Runtime",
    "Steamworks",
    "Common Redistributables",
    "SteamVR",
    "Dedicated Server",
    "Soundtrack",
]

# Spacewar, the Steamworks SDK test app
DEFAULT_IGNORED_APP_IDS: List[str] = ["480"]


class Decision(str, Enum):
    """Outcome of classifying an installed app."""

    ACCEPT = "accept"
    SUPPRESS = "suppress"


def split_csv(value: str) -> List[str]:
    """Split a comma-separated list, trimming entries and dropping empty ones."""
    return [item.strip() for item in value.split(",") if item.strip()]


def classify(
    name: str,
    app_id: str,
    ignored_app_ids: Optional[Collection[str]] = None,
    skip_keywords: Optional[Collection[str]] = None,
) -> Decision:
    """
    Decide whether an app gets a launcher.

    Args:
        name: Display name of the app
        app_id: Steam app id
        ignored_app_ids: Ids to suppress by exact match. Defaults to
            DEFAULT_IGNORED_APP_IDS when None or empty.
        skip_keywords: Case-insensitive name substrings to suppress.
            Defaults to DEFAULT_SKIP_KEYWORDS when None or empty.

    Returns:
        Decision.SUPPRESS or Decision.ACCEPT
    """
    ids = ignored_app_ids or DEFAULT_IGNORED_APP_IDS
    keywords = skip_keywords or DEFAULT_SKIP_KEYWORDS

    if app_id in ids:
        return Decision.SUPPRESS

    name_lower = name.lower()
    for keyword in keywords:
        if keyword.lower() in name_lower:
            return Decision.SUPPRESS

    return Decision.ACCEPT


@dataclass
class FilterPolicy:
    """Ignored ids and skip keywords in effect for a run."""

    ignored_app_ids: List[str] = field(
        default_factory=lambda: list(DEFAULT_IGNORED_APP_IDS)
    )
    skip_keywords: List[str] = field(
        default_factory=lambda: list(DEFAULT_SKIP_KEYWORDS)
    )

    @classmethod
    def from_csv(
        cls, skip_keywords: Optional[str] = None, ignored_app_ids: Optional[str] = None
    ) -> "FilterPolicy":
        """
        Create a FilterPolicy from comma-separated command-line values.

        A supplied list replaces the default list, it is never merged
        into it.
        """
        return cls.merged(
            skip_keywords=split_csv(skip_keywords) if skip_keywords else None,
            ignored_app_ids=split_csv(ignored_app_ids) if ignored_app_ids else None,
        )

    @classmethod
    def merged(
        cls,
        skip_keywords: Optional[List[str]] = None,
        ignored_app_ids: Optional[List[str]] = None,
    ) -> "FilterPolicy":
        """Create a FilterPolicy, falling back to defaults for lists not given."""
        policy = cls()
        if skip_keywords:
            policy.skip_keywords = list(skip_keywords)
        if ignored_app_ids:
            policy.ignored_app_ids = list(ignored_app_ids)
        return policy

    def classify(self, record: ManifestRecord) -> Decision:
        """Classify a parsed manifest record against this policy."""
        decision = classify(
            record.name, record.app_id, self.ignored_app_ids, self.skip_keywords
        )
        logger.debug(f"{record.name} ({record.app_id}): {decision.value}")
        return decision
