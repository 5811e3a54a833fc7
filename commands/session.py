"""Interactive menu session for browsing cached matches.

The session is a small state machine driven by a loop:

    MAIN_MENU -> LIST_VIEW -> DETAIL_VIEW -> LIST_VIEW -> ... -> EXIT

Every filter runs against the full cached match list, never against the
previous result.
"""

import logging
from collections.abc import Callable
from datetime import timedelta
from enum import Enum
from typing import Any

from commands.prompts import Prompter
from config.constants import (
    ACTION_EXIT,
    ACTION_FILTER_GAME,
    ACTION_FILTER_LEAGUE,
    ACTION_LIVE,
    ACTION_REFRESH,
    ACTION_SEARCH,
    ACTION_VIEW_ALL,
    ERROR_FETCH,
    ERROR_NO_LIVE_MATCHES,
    ERROR_NO_MATCHES,
    ERROR_NO_MATCHES_FOR,
    ERROR_PAYLOAD,
    GO_BACK,
    INFO_GOODBYE,
    INFO_REFRESHED,
    INFO_STALE_SNAPSHOT,
    INFO_USING_CACHE,
    MAIN_MENU_ACTIONS,
    PROMPT_ACTION,
    PROMPT_GAME,
    PROMPT_LEAGUE,
    PROMPT_MATCH,
    PROMPT_SEARCH,
    UPCOMING_MATCHES_ENDPOINT,
)
from config.settings import AppConfig
from core.errors import FetchError, PayloadParseError
from core.match import (
    Found,
    Match,
    Snapshot,
    SnapshotStore,
    cooldown_remaining,
    fetch_if_needed,
    filter_by_game,
    filter_by_league,
    filter_live,
    format_match_details,
    format_match_option,
    format_snapshot_status,
    parse_matches,
    read_validated,
    search_by_name,
)

logger = logging.getLogger(__name__)


class State(Enum):
    MAIN_MENU = "main_menu"
    LIST_VIEW = "list_view"
    DETAIL_VIEW = "detail_view"
    EXIT = "exit"


class Session:
    """Interactive browser over one cached endpoint."""

    def __init__(
        self,
        config: AppConfig,
        store: SnapshotStore,
        fetcher: Callable[[str], Any],
        prompter: Prompter,
        resource_key: str = UPCOMING_MATCHES_ENDPOINT,
    ):
        self.config = config
        self.store = store
        self.fetcher = fetcher
        self.prompter = prompter
        self.resource_key = resource_key

        self.state = State.MAIN_MENU
        self.snapshot: Snapshot | None = None
        self.matches: list[Match] = []
        self.results: list[Match] = []
        self.selected: Match | None = None

    def load(self, force: bool = False) -> bool:
        """Load matches through the freshness policy.

        On failure the previously loaded matches stay in use. If nothing is
        loaded yet, a stale snapshot on disk is shown instead.

        Args:
            force: Ignore the cooldown and refetch.

        Returns:
            True if matches were loaded, False on fetch or parse failure.
        """
        cooldown = timedelta(0) if force else self.config.cooldown
        try:
            # Payloads are decoded before they reach the store so a bad
            # response never replaces a good snapshot
            snapshot = fetch_if_needed(
                self.store,
                self.fetcher,
                self.resource_key,
                cooldown,
                validate=parse_matches,
            )
            matches = parse_matches(snapshot.data)
        except FetchError as e:
            logger.error(f"Fetch failed: {e}")
            self.prompter.echo(ERROR_FETCH.format(reason=e), fg="red")
            self._fall_back_to_cache()
            return False
        except PayloadParseError as e:
            logger.error(f"Malformed match data: {e}")
            self.prompter.echo(ERROR_PAYLOAD.format(reason=e), fg="red")
            self._fall_back_to_cache()
            return False

        self.snapshot = snapshot
        self.matches = matches
        return True

    def _fall_back_to_cache(self) -> None:
        if self.matches:
            self.prompter.echo(INFO_USING_CACHE, fg="yellow")
            return

        result = read_validated(self.store, self.resource_key, parse_matches)
        if not isinstance(result, Found):
            return

        logger.warning(
            f"Using stale snapshot for {self.resource_key} from "
            f"{result.snapshot.fetched_at.isoformat()}"
        )
        self.snapshot = result.snapshot
        self.matches = parse_matches(result.snapshot.data)
        self.prompter.echo(INFO_STALE_SNAPSHOT, fg="yellow")

    def run(self, force_refresh: bool = False) -> None:
        """Load data and run the menu loop until the user exits."""
        self.load(force=force_refresh)
        if not self.matches:
            self.prompter.echo(ERROR_NO_MATCHES, fg="red")
            return

        handlers = {
            State.MAIN_MENU: self.main_menu,
            State.LIST_VIEW: self.list_view,
            State.DETAIL_VIEW: self.detail_view,
        }
        while self.state is not State.EXIT:
            self.state = handlers[self.state]()

    def _show_results(self, results: list[Match], empty_message: str) -> State:
        if not results:
            self.prompter.echo(f"\n{empty_message}", fg="red")
            return State.MAIN_MENU
        self.results = results
        return State.LIST_VIEW

    def status_line(self) -> str:
        remaining = cooldown_remaining(self.snapshot, self.config.cooldown)
        return format_snapshot_status(
            self.snapshot, len(self.matches), int(remaining.total_seconds())
        )

    def main_menu(self) -> State:
        self.prompter.echo(f"\n{self.status_line()}", fg="blue")
        index = self.prompter.select(PROMPT_ACTION, MAIN_MENU_ACTIONS)
        action = MAIN_MENU_ACTIONS[index]
        logger.debug(f"Main menu action: {action}")

        if action == ACTION_VIEW_ALL:
            return self._show_results(self.matches, ERROR_NO_MATCHES)

        if action == ACTION_FILTER_GAME:
            game = self.prompter.text(PROMPT_GAME)
            return self._show_results(
                filter_by_game(self.matches, game),
                ERROR_NO_MATCHES_FOR.format(query=game),
            )

        if action == ACTION_FILTER_LEAGUE:
            league = self.prompter.text(PROMPT_LEAGUE)
            return self._show_results(
                filter_by_league(self.matches, league),
                ERROR_NO_MATCHES_FOR.format(query=league),
            )

        if action == ACTION_LIVE:
            return self._show_results(
                filter_live(self.matches, self.config.live_status),
                ERROR_NO_LIVE_MATCHES,
            )

        if action == ACTION_SEARCH:
            query = self.prompter.text(PROMPT_SEARCH)
            return self._show_results(
                search_by_name(self.matches, query),
                ERROR_NO_MATCHES_FOR.format(query=query),
            )

        if action == ACTION_REFRESH:
            if self.load(force=True):
                self.prompter.echo(INFO_REFRESHED, fg="green")
            return State.MAIN_MENU

        if action == ACTION_EXIT:
            self.prompter.echo(INFO_GOODBYE)
            return State.EXIT

        return State.MAIN_MENU

    def list_view(self) -> State:
        options = [format_match_option(match) for match in self.results]
        index = self.prompter.select(PROMPT_MATCH, [*options, GO_BACK])
        if index == len(self.results):
            return State.MAIN_MENU
        self.selected = self.results[index]
        return State.DETAIL_VIEW

    def detail_view(self) -> State:
        self.prompter.echo(format_match_details(self.selected))
        self.prompter.echo()
        return State.LIST_VIEW
