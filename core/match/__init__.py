"""Match module - Handles match data fetching, caching, and filtering.

This module provides a clean API for working with esports matches:
- Fetching from the PandaScore API
- Storing timestamped snapshots of each endpoint
- Reusing snapshots until their cooldown expires
- Filtering and formatting matches for the terminal
"""

from core.match.filters import (
    filter_by_game,
    filter_by_league,
    filter_live,
    search_by_name,
)
from core.match.formatter import (
    format_match_details,
    format_match_option,
    format_snapshot_status,
)
from core.match.models import Match, Opponent, parse_matches
from core.match.refresh import (
    cooldown_remaining,
    fetch_if_needed,
    read_validated,
)
from core.match.repository import (
    Absent,
    Found,
    Malformed,
    Snapshot,
    SnapshotStore,
)
from core.match.sources import fetch_endpoint, make_fetcher

__all__ = [
    "Match",
    "Opponent",
    "parse_matches",
    "Snapshot",
    "SnapshotStore",
    "Found",
    "Absent",
    "Malformed",
    "fetch_endpoint",
    "make_fetcher",
    "fetch_if_needed",
    "read_validated",
    "cooldown_remaining",
    "filter_by_game",
    "filter_by_league",
    "filter_live",
    "search_by_name",
    "format_match_details",
    "format_match_option",
    "format_snapshot_status",
]
