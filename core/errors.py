"""Exception types raised by the match browser."""


class StartupConfigError(Exception):
    """Raised when configuration is missing or invalid at startup."""


class FetchError(Exception):
    """Raised when the remote API request fails.

    Attributes:
        endpoint: API path that was requested.
        status_code: HTTP status code, or None for transport failures.
        reason: Status text or transport error description.
    """

    def __init__(
        self, endpoint: str, reason: str, status_code: int | None = None
    ):
        self.endpoint = endpoint
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"{status_code} {reason} ({endpoint})"
        else:
            message = f"{reason} ({endpoint})"
        super().__init__(message)


class PayloadParseError(ValueError):
    """Raised when the API returns data that is not a list of matches."""
