"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API or the contributions provider."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class ActivityFetchError(Exception):
    """One or more of the activity sources could not be retrieved.

    Raised for transport errors, non-200 responses and payloads that cannot
    be parsed at all. Callers treat any failed source as a failure of the
    whole fetch; `source` is kept for logging only.
    """

    def __init__(self, identity: str, source: str, reason: str):
        self.identity = identity
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to fetch {source} for {identity}: {reason}")
