"""Tests for config.settings module."""

import tempfile
from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from config import settings
from config.constants import BASE_URL, ERROR_MISSING_TOKEN
from core.errors import StartupConfigError


@pytest.fixture(autouse=True)
def no_env_file():
    """Keep a developer's real .env out of the tests."""
    with patch.object(settings, "env_path", Path("/nonexistent/.env")):
        yield


def test_env_path_points_to_root():
    """Test that the default env file lives in the project root."""
    from config.paths import ENV_FILE, PROJECT_ROOT

    assert ENV_FILE.name == ".env"
    assert ENV_FILE.parent == PROJECT_ROOT


def test_get_with_default():
    """Test get() returns default when key not found."""
    with patch.dict("os.environ", {}, clear=True):
        assert settings.get("NONEXISTENT_KEY", "default_value") == (
            "default_value"
        )


def test_get_required_raises_when_missing():
    """Test get_required() raises ValueError when key missing."""
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(ValueError, match="Required environment variable"):
            settings.get_required("NONEXISTENT_KEY")


def test_get_required_returns_value():
    """Test get_required() returns value when key exists."""
    with patch.dict("os.environ", {"TEST_KEY": "test_value"}):
        assert settings.get_required("TEST_KEY") == "test_value"


def test_exists_returns_false_when_no_env():
    """Test exists() returns False when .env doesn't exist."""
    assert settings.exists() is False


def test_exists_returns_true_when_env_exists():
    """Test exists() returns True when .env exists."""
    with tempfile.NamedTemporaryFile(suffix=".env") as tmp:
        with patch.object(settings, "env_path", Path(tmp.name)):
            assert settings.exists() is True


def test_load_config_missing_token_is_fatal():
    """Test load_config() raises StartupConfigError without API_TOKEN."""
    with patch.dict("os.environ", {}, clear=True):
        with pytest.raises(StartupConfigError, match="API token is missing"):
            settings.load_config()
    assert "API token is missing" in ERROR_MISSING_TOKEN


def test_load_config_defaults():
    """Test load_config() fills in defaults for optional values."""
    with patch.dict("os.environ", {"API_TOKEN": "abc123"}, clear=True):
        config = settings.load_config()

    assert config.api_token == "abc123"
    assert config.base_url == BASE_URL
    assert config.cooldown == timedelta(minutes=10)
    assert config.request_timeout == 30
    assert config.live_status == "live"


def test_load_config_reads_overrides(tmp_path):
    """Test load_config() honors environment overrides."""
    env = {
        "API_TOKEN": "abc123",
        "API_BASE_URL": "http://localhost:8000/",
        "SNAPSHOT_COOLDOWN_MINUTES": "0",
        "REQUEST_TIMEOUT": "2.5",
        "SNAPSHOT_DIR": str(tmp_path),
        "LIVE_STATUS": "running",
    }
    with patch.dict("os.environ", env, clear=True):
        config = settings.load_config()

    assert config.base_url == "http://localhost:8000"
    assert config.cooldown == timedelta(0)
    assert config.request_timeout == 2.5
    assert config.snapshot_dir == tmp_path
    assert config.live_status == "running"


def test_load_config_cooldown_argument_wins():
    """Test an explicit cooldown overrides the environment."""
    env = {"API_TOKEN": "abc123", "SNAPSHOT_COOLDOWN_MINUTES": "30"}
    with patch.dict("os.environ", env, clear=True):
        config = settings.load_config(cooldown_minutes=2)
    assert config.cooldown == timedelta(minutes=2)


def test_load_config_invalid_values():
    """Test load_config() lists validation errors."""
    env = {"API_TOKEN": "abc123", "SNAPSHOT_COOLDOWN_MINUTES": "soon"}
    with patch.dict("os.environ", env, clear=True):
        with pytest.raises(StartupConfigError, match="SNAPSHOT_COOLDOWN"):
            settings.load_config()


def test_load_config_reads_env_file(tmp_path):
    """Test load_config() picks up values from the .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("API_TOKEN=from_file\n")
    with patch.dict("os.environ", {}, clear=True):
        with patch.object(settings, "env_path", env_file):
            config = settings.load_config()
    assert config.api_token == "from_file"


def test_app_config_is_immutable(app_config):
    """Test AppConfig cannot be modified after creation."""
    with pytest.raises(AttributeError):
        app_config.api_token = "other"
