"""Snapshot repository - File I/O operations.

Each API endpoint is cached in its own JSON file holding the time it was
fetched and the raw payload:

    {"fetched_at": "2025-11-25T20:15:00+00:00", "data": [...]}
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pendulum

from core.utils.date_parser import parse_iso_datetime

logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = {"fetched_at", "data"}


@dataclass(frozen=True)
class Snapshot:
    """Timestamped copy of one endpoint's payload."""

    fetched_at: pendulum.DateTime
    data: Any


@dataclass(frozen=True)
class Found:
    snapshot: Snapshot


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Malformed:
    reason: str


SnapshotResult = Found | Absent | Malformed


def snapshot_filename(resource_key: str) -> str:
    """Derive the snapshot file name for an endpoint.

    Args:
        resource_key: API path such as "/matches/upcoming".

    Returns:
        File name such as "snapshot_matches_upcoming.json".
    """
    return f"snapshot_{resource_key.strip('/').replace('/', '_')}.json"


class SnapshotStore:
    """Reads and writes snapshot files inside a single directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def snapshot_path(self, resource_key: str) -> Path:
        return self.directory / snapshot_filename(resource_key)

    def write(self, resource_key: str, payload: Any) -> Snapshot:
        """Write a new snapshot, replacing any previous one.

        Args:
            resource_key: API path the payload was fetched from.
            payload: JSON-serializable API response.

        Returns:
            The snapshot that was written.

        Raises:
            OSError: If the directory or file cannot be written.
            TypeError: If the payload is not JSON-serializable.
        """
        path = self.snapshot_path(resource_key)
        fetched_at = pendulum.now("UTC")

        # fetched_at must increase across writes for the same key
        previous = self.read(resource_key)
        if (
            isinstance(previous, Found)
            and fetched_at <= previous.snapshot.fetched_at
        ):
            fetched_at = previous.snapshot.fetched_at.add(microseconds=1)

        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(
                    {"fetched_at": fetched_at.isoformat(), "data": payload},
                    f,
                    ensure_ascii=False,
                    indent=2,
                )
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError):
            tmp_path.unlink(missing_ok=True)
            raise

        logger.info(
            f"Snapshot saved to {path}", extra={"resource_key": resource_key}
        )
        return Snapshot(fetched_at=fetched_at, data=payload)

    def read(self, resource_key: str) -> SnapshotResult:
        """Read the snapshot for an endpoint.

        Args:
            resource_key: API path the snapshot was saved under.

        Returns:
            Found with the snapshot, Absent if no file exists, or
            Malformed with a reason if the file cannot be decoded.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        path = self.snapshot_path(resource_key)
        if not path.exists():
            return Absent()

        content = path.read_bytes()

        try:
            raw = json.loads(content.decode("utf-8"))
        except UnicodeDecodeError as e:
            logger.warning(f"Snapshot at {path} is not UTF-8: {e}")
            return Malformed(f"invalid encoding: {e}")
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt snapshot JSON at {path}: {e}")
            return Malformed(f"invalid JSON: {e}")

        if not isinstance(raw, dict) or set(raw) != SNAPSHOT_KEYS:
            logger.warning(f"Unexpected snapshot structure at {path}")
            return Malformed("expected an object with fetched_at and data")

        try:
            fetched_at = parse_iso_datetime(raw["fetched_at"])
        except ValueError as e:
            return Malformed(str(e))

        return Found(Snapshot(fetched_at=fetched_at, data=raw["data"]))
