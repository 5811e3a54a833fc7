"""Immutable constants for the esports match browser."""

# PandaScore API
BASE_URL = "https://api.pandascore.co"
UPCOMING_MATCHES_ENDPOINT = "/matches/upcoming"

# Snapshot defaults
DEFAULT_COOLDOWN_MINUTES = 10
DEFAULT_REQUEST_TIMEOUT = 30

# Status value the API uses for a match in progress
LIVE_STATUS = "live"

# Main menu actions
ACTION_VIEW_ALL = "View All Matches"
ACTION_FILTER_GAME = "Filter by Game"
ACTION_FILTER_LEAGUE = "Filter by League"
ACTION_LIVE = "Live Matches"
ACTION_SEARCH = "Search by Name"
ACTION_REFRESH = "Refresh Data"
ACTION_EXIT = "Exit"

MAIN_MENU_ACTIONS = [
    ACTION_VIEW_ALL,
    ACTION_FILTER_GAME,
    ACTION_FILTER_LEAGUE,
    ACTION_LIVE,
    ACTION_SEARCH,
    ACTION_REFRESH,
    ACTION_EXIT,
]

GO_BACK = "Go Back"

# Prompts
PROMPT_ACTION = "Select an action"
PROMPT_MATCH = "Select a match to view details"
PROMPT_GAME = "Enter the game name (e.g., Counter-Strike)"
PROMPT_LEAGUE = "Enter the league name (e.g., LCK)"
PROMPT_SEARCH = "Enter part of the match name"

# Error messages
ERROR_MISSING_TOKEN = "API token is missing! Please set it in your .env file."
ERROR_FETCH = "Could not fetch matches: {reason}"
ERROR_PAYLOAD = "Received malformed match data: {reason}"
ERROR_NO_MATCHES = "No matches found."
ERROR_NO_MATCHES_FOR = 'No matches found for "{query}".'
ERROR_NO_LIVE_MATCHES = "No live matches right now."

# Info messages
INFO_USING_CACHE = "Keeping previously loaded matches."
INFO_STALE_SNAPSHOT = "Showing cached matches from an earlier fetch."
INFO_REFRESHED = "Match data refreshed."
INFO_GOODBYE = "Goodbye!"
