"""Esports Match Browser - Main entry point.

An interactive terminal client that caches PandaScore match data locally
and lets you browse and filter upcoming esports matches.

Exit codes:
    0: Success
    1: Configuration error
"""

import logging
import sys

import click

from commands.prompts import ClickPrompter
from commands.session import Session
from config import settings
from config.paths import LOG_FILE
from core.errors import StartupConfigError
from core.logging_config import setup_logging
from core.match import SnapshotStore, make_fetcher

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--cooldown",
    type=click.IntRange(min=0),
    default=None,
    help="Minutes before cached matches are refetched "
    "(overrides SNAPSHOT_COOLDOWN_MINUTES).",
)
@click.option(
    "--refresh", is_flag=True, help="Ignore the cache and refetch on startup."
)
@click.option("--verbose", "-v", is_flag=True, help="Show log output.")
def main(cooldown: int | None, refresh: bool, verbose: bool) -> None:
    """Browse upcoming esports matches from PandaScore."""
    setup_logging(LOG_FILE, verbose=verbose)

    try:
        config = settings.load_config(cooldown_minutes=cooldown)
    except StartupConfigError as e:
        logger.error(f"Configuration error: {e}")
        click.secho(str(e), fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    logger.info("Configuration loaded and validated successfully")

    session = Session(
        config=config,
        store=SnapshotStore(config.snapshot_dir),
        fetcher=make_fetcher(config),
        prompter=ClickPrompter(),
    )
    session.run(force_refresh=refresh)
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
