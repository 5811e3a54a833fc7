"""Match filters.

Every filter returns a new list in the original order and leaves its input
untouched. An empty result is a normal value, not an error.
"""

from collections.abc import Iterable

from config.constants import LIVE_STATUS
from core.match.models import Match


def filter_by_game(matches: Iterable[Match], game: str) -> list[Match]:
    """Matches whose game name equals `game`, ignoring case."""
    wanted = game.strip().casefold()
    return [match for match in matches if match.game.casefold() == wanted]


def filter_by_league(matches: Iterable[Match], query: str) -> list[Match]:
    """Matches whose league name contains `query`, ignoring case."""
    needle = query.strip().casefold()
    return [match for match in matches if needle in match.league.casefold()]


def filter_live(
    matches: Iterable[Match], live_status: str = LIVE_STATUS
) -> list[Match]:
    """Matches currently in progress.

    Status values come from a fixed API vocabulary, so the comparison is
    exact and case-sensitive.
    """
    return [match for match in matches if match.status == live_status]


def search_by_name(matches: Iterable[Match], query: str) -> list[Match]:
    """Matches whose name contains `query`, ignoring case."""
    needle = query.strip().casefold()
    return [match for match in matches if needle in match.name.casefold()]
