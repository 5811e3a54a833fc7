"""Immutable match and opponent value types decoded from PandaScore JSON."""

import logging
from dataclasses import dataclass, field
from typing import Any

import pendulum

from core.errors import PayloadParseError
from core.utils.date_parser import parse_iso_datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Opponent:
    """A team or player taking part in a match."""

    id: int
    name: str
    acronym: str | None = None
    location: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Opponent":
        """Build an Opponent from an `opponents[].opponent` object.

        Args:
            data: Raw opponent dictionary.

        Returns:
            Opponent with empty optional fields normalized to None.
        """
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            acronym=data.get("acronym") or None,
            location=data.get("location") or None,
        )


@dataclass(frozen=True)
class Match:
    """A scheduled or live esports match."""

    id: int
    name: str
    scheduled_at: pendulum.DateTime | None
    status: str
    game: str
    league: str
    tournament: str
    opponents: tuple[Opponent, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Match":
        """Build a Match from a raw PandaScore match object.

        Args:
            data: Raw match dictionary as returned by the API.

        Returns:
            Decoded Match.

        Raises:
            PayloadParseError: If a required field is missing or invalid.
        """
        try:
            scheduled = data.get("scheduled_at")
            return cls(
                id=int(data["id"]),
                name=str(data["name"]),
                scheduled_at=(
                    parse_iso_datetime(scheduled) if scheduled else None
                ),
                status=str(data["status"]),
                game=str(data["videogame"]["name"]),
                league=str(data["league"]["name"]),
                tournament=str(data["tournament"]["name"]),
                opponents=tuple(
                    Opponent.from_api(entry["opponent"])
                    for entry in data.get("opponents") or []
                ),
            )
        except (KeyError, TypeError, ValueError) as e:
            match_id = data.get("id") if isinstance(data, dict) else None
            raise PayloadParseError(
                f"Invalid match object (id={match_id}): {e!r}"
            ) from e


def parse_matches(payload: Any) -> list[Match]:
    """Decode a JSON payload into a list of matches.

    Args:
        payload: Decoded JSON, expected to be a list of match objects.

    Returns:
        Matches in payload order.

    Raises:
        PayloadParseError: If payload is not a list or an item is invalid.
    """
    if not isinstance(payload, list):
        raise PayloadParseError(
            f"Expected a list of matches, got {type(payload).__name__}"
        )
    matches = [Match.from_api(item) for item in payload]
    logger.debug(f"Parsed {len(matches)} matches")
    return matches
