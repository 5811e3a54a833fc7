"""Snapshot freshness policy - reuse cached data or refetch."""

import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

import pendulum

from core.errors import PayloadParseError
from core.match.repository import (
    Found,
    Malformed,
    Snapshot,
    SnapshotResult,
    SnapshotStore,
)

logger = logging.getLogger(__name__)


def read_validated(
    store: SnapshotStore,
    resource_key: str,
    validate: Callable[[Any], Any] | None = None,
) -> SnapshotResult:
    """Read a snapshot and check its payload.

    Args:
        store: Snapshot store to read from.
        resource_key: API path to load.
        validate: Optional callable raising PayloadParseError for bad data.

    Returns:
        The store's result, with undecodable payloads reported as Malformed.
    """
    result = store.read(resource_key)
    if isinstance(result, Found) and validate is not None:
        try:
            validate(result.snapshot.data)
        except PayloadParseError as e:
            return Malformed(f"invalid payload: {e}")
    return result


def fetch_if_needed(
    store: SnapshotStore,
    fetcher: Callable[[str], Any],
    resource_key: str,
    cooldown: timedelta,
    now: pendulum.DateTime | None = None,
    validate: Callable[[Any], Any] | None = None,
) -> Snapshot:
    """Return the cached snapshot if it is fresh, otherwise refetch it.

    Args:
        store: Snapshot store to read from and write to.
        fetcher: Callable returning the payload for an endpoint.
        resource_key: API path to load.
        cooldown: Minimum age before the snapshot is refetched.
        now: Current time (defaults to pendulum.now("UTC")).
        validate: Optional payload check applied to the cached data and to
            fetched data before it is written; raises PayloadParseError.

    Returns:
        The fresh cached snapshot or the newly written one.

    Raises:
        FetchError: If the API request fails. Nothing is written.
        PayloadParseError: If the API payload is malformed. Nothing is written.
    """
    now = now or pendulum.now("UTC")
    result = read_validated(store, resource_key, validate)

    if isinstance(result, Found):
        elapsed = now - result.snapshot.fetched_at
        if elapsed < cooldown:
            logger.info(
                f"Using snapshot for {resource_key} "
                f"(age {int(elapsed.total_seconds())}s)",
                extra={"resource_key": resource_key},
            )
            return result.snapshot
        logger.info(
            f"Snapshot for {resource_key} is stale, refetching",
            extra={"resource_key": resource_key},
        )
    elif isinstance(result, Malformed):
        logger.warning(
            f"Ignoring malformed snapshot for {resource_key}: "
            f"{result.reason}",
            extra={"resource_key": resource_key},
        )
    else:
        logger.info(
            f"No snapshot for {resource_key}, fetching",
            extra={"resource_key": resource_key},
        )

    payload = fetcher(resource_key)
    if validate is not None:
        validate(payload)
    return store.write(resource_key, payload)


def cooldown_remaining(
    snapshot: Snapshot,
    cooldown: timedelta,
    now: pendulum.DateTime | None = None,
) -> timedelta:
    """Time left until a snapshot becomes eligible for refetch.

    Returns:
        Remaining time, or zero if the snapshot is already stale.
    """
    now = now or pendulum.now("UTC")
    remaining = cooldown - (now - snapshot.fetched_at)
    return max(remaining, timedelta(0))
