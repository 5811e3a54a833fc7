"""Structured logging configuration for better log analysis."""

import json
import logging
import logging.handlers
from datetime import UTC, datetime
from pathlib import Path

# Extra fields copied into JSON log lines when present on a record
EXTRA_FIELDS = ("resource_key", "endpoint", "status_code")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON for easier parsing with tools like jq, grep,
    or log aggregators.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data)


def setup_logging(log_file: Path, verbose: bool = False) -> None:
    """Configure console and rotating JSON file logging.

    The console stays quiet (warnings only) unless verbose is set so log
    lines do not interleave with the interactive menus.

    Args:
        log_file: Path of the JSON log file.
        verbose: Show INFO and DEBUG messages on the console.
    """
    # Console handler - human-readable format
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    # File handler - JSON format for easier parsing
    file_handler = logging.handlers.RotatingFileHandler(
        str(log_file),
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(StructuredFormatter())

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[console_handler, file_handler],
        force=True,
    )
