"""Pytest configuration and shared fixtures."""

from datetime import timedelta

import pytest

from config.settings import AppConfig
from core.match import SnapshotStore


def make_raw_match(
    match_id: int,
    name: str = "Team A vs Team B",
    game: str = "Counter-Strike",
    league: str = "ESL Pro League",
    status: str = "not_started",
    scheduled_at: str | None = "2025-11-25T20:15:00Z",
) -> dict:
    """Build a PandaScore-shaped match object."""
    return {
        "id": match_id,
        "name": name,
        "scheduled_at": scheduled_at,
        "status": status,
        "videogame": {"id": 3, "name": game},
        "league": {"id": 4, "name": league},
        "tournament": {"id": 5, "name": "Playoffs"},
        "opponents": [
            {
                "type": "Team",
                "opponent": {
                    "id": 100 + match_id,
                    "name": "Team A",
                    "acronym": "TA",
                    "location": "DK",
                },
            },
            {
                "type": "Team",
                "opponent": {
                    "id": 200 + match_id,
                    "name": "Team B",
                    "acronym": None,
                    "location": "",
                },
            },
        ],
    }


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    monkeypatch.setenv("API_TOKEN", "test_token_123")
    monkeypatch.setenv("SNAPSHOT_COOLDOWN_MINUTES", "10")


@pytest.fixture
def raw_matches():
    """Raw API payload with a mix of games, leagues and statuses."""
    return [
        make_raw_match(1, name="Semifinal A", status="live"),
        make_raw_match(
            2,
            name="Quarterfinal B",
            game="Valorant",
            league="VCT Champions",
            status="finished",
        ),
        make_raw_match(
            3, name="Grand Semifinal", game="counter-strike", status="live"
        ),
        make_raw_match(
            4,
            name="Group Stage",
            game="League of Legends",
            league="LCK",
            scheduled_at=None,
        ),
    ]


@pytest.fixture
def app_config(tmp_path):
    """Configuration pointing snapshots at a temporary directory."""
    return AppConfig(
        api_token="test_token_123",
        base_url="https://api.example.test",
        cooldown=timedelta(minutes=10),
        snapshot_dir=tmp_path / "snapshots",
        request_timeout=5,
    )


@pytest.fixture
def store(app_config):
    """Snapshot store backed by the temporary directory."""
    return SnapshotStore(app_config.snapshot_dir)


@pytest.fixture
def match_factory():
    """Factory for PandaScore-shaped match objects."""
    return make_raw_match
