"""Environment-based settings loaded from the project's .env file."""

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from config.constants import (
    BASE_URL,
    DEFAULT_COOLDOWN_MINUTES,
    DEFAULT_REQUEST_TIMEOUT,
    ERROR_MISSING_TOKEN,
    LIVE_STATUS,
)
from config.paths import ENV_FILE, SNAPSHOT_DIR
from config.validation import validate_config
from core.errors import StartupConfigError

logger = logging.getLogger(__name__)

env_path = ENV_FILE


@dataclass(frozen=True)
class AppConfig:
    """Settings resolved once at startup and passed to every component."""

    api_token: str
    base_url: str = BASE_URL
    cooldown: timedelta = timedelta(minutes=DEFAULT_COOLDOWN_MINUTES)
    snapshot_dir: Path = SNAPSHOT_DIR
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    live_status: str = LIVE_STATUS


def exists() -> bool:
    """Check whether the .env file is present.

    Returns:
        True if the .env file exists, False otherwise.
    """
    return Path(env_path).exists()


def load_env() -> None:
    """Load the .env file into the process environment.

    Variables already set in the environment take precedence.
    """
    if exists():
        load_dotenv(env_path, override=False)
        logger.debug(f"Loaded environment from {env_path}")


def get(key: str, default: str | None = None) -> str | None:
    """Get an environment variable.

    Args:
        key: Variable name.
        default: Value returned when the variable is unset.

    Returns:
        Variable value or default.
    """
    return os.environ.get(key, default)


def get_required(key: str) -> str:
    """Get an environment variable that must be set.

    Args:
        key: Variable name.

    Returns:
        Variable value.

    Raises:
        ValueError: If the variable is unset or empty.
    """
    value = os.environ.get(key)
    if not value:
        raise ValueError(f"Required environment variable {key} is not set")
    return value


def load_config(cooldown_minutes: int | None = None) -> AppConfig:
    """Build the application configuration from the environment.

    Args:
        cooldown_minutes: Optional override for SNAPSHOT_COOLDOWN_MINUTES.

    Returns:
        Validated, immutable AppConfig.

    Raises:
        StartupConfigError: If API_TOKEN is missing or a value is invalid.
    """
    load_env()

    try:
        token = get_required("API_TOKEN")
    except ValueError as e:
        raise StartupConfigError(ERROR_MISSING_TOKEN) from e

    cooldown = (
        str(cooldown_minutes)
        if cooldown_minutes is not None
        else get("SNAPSHOT_COOLDOWN_MINUTES", str(DEFAULT_COOLDOWN_MINUTES))
    )
    values = {
        "API_TOKEN": token,
        "API_BASE_URL": get("API_BASE_URL", BASE_URL),
        "SNAPSHOT_COOLDOWN_MINUTES": cooldown,
        "REQUEST_TIMEOUT": get("REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)),
    }

    errors = validate_config(values)
    if errors:
        raise StartupConfigError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {err}" for err in errors)
        )

    return AppConfig(
        api_token=token,
        base_url=values["API_BASE_URL"].rstrip("/"),
        cooldown=timedelta(minutes=int(values["SNAPSHOT_COOLDOWN_MINUTES"])),
        snapshot_dir=Path(get("SNAPSHOT_DIR") or SNAPSHOT_DIR),
        request_timeout=float(values["REQUEST_TIMEOUT"]),
        live_status=get("LIVE_STATUS") or LIVE_STATUS,
    )
