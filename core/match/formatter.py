"""Match formatters for terminal output."""

import logging

import click

from core.match.models import Match
from core.match.repository import Snapshot
from core.utils.date_parser import format_local_datetime, format_remaining_time

logger = logging.getLogger(__name__)


def _label(text: str) -> str:
    return click.style(text, bold=True)


def format_match_option(match: Match) -> str:
    """One-line label used in the match selection list.

    Returns:
        "name (scheduled time)".
    """
    return f"{match.name} ({format_local_datetime(match.scheduled_at)})"


def format_match_details(match: Match) -> str:
    """Generate the detail view for a single match.

    Args:
        match: Match to describe.

    Returns:
        Multi-line colored string with match metadata and opponents.
    """
    lines = [
        click.style(f"\nMatch: {match.name}", fg="green", bold=True),
        f"{_label('Game:')} {click.style(match.game, fg='cyan')}",
        f"{_label('League:')} {click.style(match.league, fg='yellow')}",
        f"{_label('Tournament:')} "
        f"{click.style(match.tournament, fg='yellow')}",
        f"{_label('Scheduled At:')} "
        f"{format_local_datetime(match.scheduled_at)}",
        f"{_label('Status:')} {match.status}",
        _label("\nTeams:"),
    ]

    if not match.opponents:
        lines.append("To be decided")

    for idx, opponent in enumerate(match.opponents, start=1):
        line = f"{idx}. {click.style(opponent.name, fg='cyan')}"
        if opponent.acronym:
            line += f" ({click.style(opponent.acronym, fg='yellow')})"
        if opponent.location:
            line += f" - {click.style(opponent.location, fg='green')}"
        lines.append(line)

    return "\n".join(lines)


def format_snapshot_status(
    snapshot: Snapshot, match_count: int, remaining_seconds: int
) -> str:
    """Status line describing the cached data.

    Args:
        snapshot: Snapshot the matches were loaded from.
        match_count: Number of cached matches.
        remaining_seconds: Seconds until a refetch is allowed.

    Returns:
        e.g. "42 matches cached (fetched Tue 25 Nov 2025, 20:15,
        refresh in 8m)".
    """
    fetched = format_local_datetime(snapshot.fetched_at)
    if remaining_seconds > 0:
        refresh = f"refresh in {format_remaining_time(remaining_seconds)}"
    else:
        refresh = "refresh due"
    return f"{match_count} matches cached (fetched {fetched}, {refresh})"
