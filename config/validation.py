"""Configuration validation utilities."""

import logging
from typing import Any
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def validate_api_token(token: str) -> bool:
    """Validate API token format.

    Args:
        token: PandaScore bearer token to validate.

    Returns:
        True if token format is valid, False otherwise.
    """
    # Tokens are opaque strings; reject blanks and .env placeholders
    return (
        bool(token.strip())
        and " " not in token.strip()
        and not token.startswith("your_")
        and not token.startswith("YOUR_")
    )


def validate_base_url(url: str) -> bool:
    """Validate the API base URL.

    Args:
        url: Base origin such as https://api.pandascore.co.

    Returns:
        True if URL has an http(s) scheme and a host, False otherwise.
    """
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_cooldown_minutes(minutes: str) -> bool:
    """Validate snapshot cooldown is a non-negative integer.

    Zero is allowed and forces a refetch on every load.

    Args:
        minutes: Minutes value to validate.

    Returns:
        True if minutes is valid, False otherwise.
    """
    return minutes.isdigit()


def validate_timeout(seconds: str) -> bool:
    """Validate request timeout is a positive number.

    Args:
        seconds: Timeout value to validate.

    Returns:
        True if timeout is a positive number, False otherwise.
    """
    try:
        return float(seconds) > 0
    except ValueError:
        return False


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate all configuration values.

    Args:
        config: Dictionary of configuration key-value pairs.

    Returns:
        List of validation error messages (empty if all valid).

    Example:
        >>> errors = validate_config({
        ...     "API_TOKEN": "abc123",
        ...     "SNAPSHOT_COOLDOWN_MINUTES": "10",
        ... })
        >>> errors
        []
    """
    errors = []

    if not validate_api_token(config.get("API_TOKEN", "")):
        errors.append(
            "Invalid API_TOKEN (must be non-empty and not a placeholder)"
        )

    base_url = config.get("API_BASE_URL")
    if base_url is not None and not validate_base_url(base_url):
        errors.append("API_BASE_URL must be an http(s) URL")

    cooldown = config.get("SNAPSHOT_COOLDOWN_MINUTES", "10")
    if not validate_cooldown_minutes(cooldown):
        errors.append(
            "SNAPSHOT_COOLDOWN_MINUTES must be a non-negative integer"
        )

    timeout = config.get("REQUEST_TIMEOUT", "30")
    if not validate_timeout(timeout):
        errors.append("REQUEST_TIMEOUT must be a positive number")

    if errors:
        logger.error(f"Configuration validation failed: {errors}")
    else:
        logger.info("Configuration validation passed")

    return errors
