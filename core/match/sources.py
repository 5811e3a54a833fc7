"""Match data source - PandaScore REST API."""

import json
import logging
from collections.abc import Callable
from typing import Any

import requests

from config.settings import AppConfig
from core.errors import FetchError, PayloadParseError

logger = logging.getLogger(__name__)


def _get_headers(config: AppConfig) -> dict:
    """Build request headers with the bearer token.

    Returns:
        Dictionary with Authorization and Accept headers.
    """
    return {
        "Authorization": f"Bearer {config.api_token}",
        "Accept": "application/json",
    }


def fetch_endpoint(config: AppConfig, endpoint: str) -> list[Any]:
    """Fetch a list payload from the API.

    Args:
        config: Application configuration (base URL, token, timeout).
        endpoint: API path such as "/matches/upcoming".

    Returns:
        Decoded JSON list, exactly as returned by the API.

    Raises:
        FetchError: On a non-2xx response or a transport failure.
        PayloadParseError: If the body is not a JSON list.
    """
    url = f"{config.base_url}{endpoint}"
    logger.info(f"Fetching data from API: {url}", extra={"endpoint": endpoint})

    try:
        response = requests.get(
            url, headers=_get_headers(config), timeout=config.request_timeout
        )
    except requests.RequestException as e:
        logger.error(f"HTTP request failed: {e}", extra={"endpoint": endpoint})
        raise FetchError(endpoint, str(e)) from e

    if not response.ok:
        logger.error(
            f"Error: {response.status_code} {response.reason}",
            extra={"endpoint": endpoint, "status_code": response.status_code},
        )
        raise FetchError(
            endpoint, response.reason or "HTTP error", response.status_code
        )

    try:
        data = response.json()
    except (json.JSONDecodeError, ValueError) as e:
        raise PayloadParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PayloadParseError(
            f"Expected a JSON array from {endpoint}, "
            f"got {type(data).__name__}"
        )

    logger.info(
        f"Fetched {len(data)} items from {endpoint}",
        extra={"endpoint": endpoint},
    )
    return data


def make_fetcher(config: AppConfig) -> Callable[[str], list[Any]]:
    """Bind the configuration into a one-argument fetch function.

    Args:
        config: Application configuration.

    Returns:
        Callable taking an endpoint and returning its payload.
    """

    def fetcher(endpoint: str) -> list[Any]:
        return fetch_endpoint(config, endpoint)

    return fetcher
