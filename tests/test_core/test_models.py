"""Tests for core.match.models module."""

import dataclasses

import pendulum
import pytest

from core.errors import PayloadParseError
from core.match import Match, Opponent, parse_matches


def test_match_from_api(match_factory):
    """Test decoding a full PandaScore match object."""
    match = Match.from_api(match_factory(7, name="Final"))

    assert match.id == 7
    assert match.name == "Final"
    assert match.game == "Counter-Strike"
    assert match.league == "ESL Pro League"
    assert match.tournament == "Playoffs"
    assert match.status == "not_started"
    assert match.scheduled_at == pendulum.datetime(2025, 11, 25, 20, 15)
    assert [o.name for o in match.opponents] == ["Team A", "Team B"]


def test_opponent_optional_fields_are_none(match_factory):
    """Test that missing or empty acronym/location become None."""
    match = Match.from_api(match_factory(1))
    first, second = match.opponents

    assert first.acronym == "TA"
    assert first.location == "DK"
    assert second.acronym is None
    assert second.location is None


def test_opponent_without_optional_keys():
    """Test decoding an opponent that omits optional keys entirely."""
    opponent = Opponent.from_api({"id": 5, "name": "Solo"})
    assert opponent == Opponent(id=5, name="Solo")


def test_unscheduled_match(match_factory):
    """Test that a null scheduled_at is kept as None."""
    match = Match.from_api(match_factory(1, scheduled_at=None))
    assert match.scheduled_at is None


def test_match_without_opponents(match_factory):
    """Test that TBD matches with null opponents decode to an empty tuple."""
    raw = match_factory(1)
    raw["opponents"] = None
    assert Match.from_api(raw).opponents == ()


def test_match_is_immutable(match_factory):
    """Test that a decoded match cannot be modified."""
    match = Match.from_api(match_factory(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        match.name = "Changed"


def test_missing_field_raises_parse_error(match_factory):
    """Test that a missing required key raises PayloadParseError."""
    raw = match_factory(9)
    del raw["videogame"]
    with pytest.raises(PayloadParseError, match="id=9"):
        Match.from_api(raw)


def test_invalid_scheduled_at_raises_parse_error(match_factory):
    """Test that an unparseable timestamp raises PayloadParseError."""
    with pytest.raises(PayloadParseError):
        Match.from_api(match_factory(1, scheduled_at="next tuesday"))


def test_parse_matches_keeps_order(raw_matches):
    """Test parse_matches() decodes every item in payload order."""
    matches = parse_matches(raw_matches)
    assert [m.id for m in matches] == [1, 2, 3, 4]


def test_parse_matches_empty_list():
    """Test that an empty payload is a valid empty result."""
    assert parse_matches([]) == []


def test_parse_matches_rejects_non_list():
    """Test parse_matches() rejects payloads that are not lists."""
    with pytest.raises(PayloadParseError, match="Expected a list"):
        parse_matches({"error": "nope"})
