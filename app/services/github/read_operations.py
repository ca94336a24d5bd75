"""
GitHub activity read operations.

Fetches the three independent sources behind the activity summary:
- Profile summary (follower and public repo counts)
- One bounded page of repositories (stars and primary language)
- Daily contribution calendar (rolling total and per-day counts)

All three are read-only and fetched concurrently. Any failure fails the
whole fetch with ActivityFetchError; nothing is retried.
"""

import asyncio
import logging
from typing import Any

import httpx

from app.config import Settings
from app.config import settings as default_settings
from app.services.github.constants import (
    SOURCE_CONTRIBUTIONS,
    SOURCE_PROFILE,
    SOURCE_REPOSITORIES,
    is_valid_username,
)
from app.services.github.exceptions import ActivityFetchError, GitHubAPIError
from app.services.github.helpers import coerce_count, handle_error_response
from app.services.github.http_client import get_http_client
from app.services.github.types import (
    RawActivity,
    RawContributionCalendar,
    RawContributionDay,
    RawProfile,
    RawRepository,
)

logger = logging.getLogger(__name__)


class MalformedPayloadError(ValueError):
    """A response body could not be parsed into the expected shape."""


class GitHubActivityReader:
    """
    Read-only operations for the activity sources.

    Uses the shared HTTP client singleton for connection pooling. The
    optional GitHub token is only attached to GitHub API requests.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or default_settings
        self._github_headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.config.github_api_version,
        }
        if self.config.github_auth_enabled:
            self._github_headers["Authorization"] = f"Bearer {self.config.github_token}"
        self._contributions_headers = {"Accept": "application/json"}

    # ------------------------------------------------------------------
    # Normalizers
    # ------------------------------------------------------------------

    def _normalize_profile(self, data: Any) -> RawProfile:
        """Convert GitHub user response to RawProfile."""
        if not isinstance(data, dict):
            raise MalformedPayloadError("profile payload is not an object")
        return RawProfile(
            public_repo_count=coerce_count(data.get("public_repos")),
            follower_count=coerce_count(data.get("followers")),
        )

    def _normalize_repo(self, data: Any) -> RawRepository:
        """Convert one GitHub repo record to RawRepository."""
        if not isinstance(data, dict):
            raise MalformedPayloadError("repository record is not an object")
        language = data.get("language")
        return RawRepository(
            star_count=coerce_count(data.get("stargazers_count")),
            primary_language=language if isinstance(language, str) and language else None,
        )

    def _normalize_repos(self, data: Any) -> list[RawRepository]:
        if not isinstance(data, list):
            raise MalformedPayloadError("repository payload is not a list")
        return [self._normalize_repo(r) for r in data]

    def _normalize_calendar(self, data: Any) -> RawContributionCalendar:
        """
        Convert contributions provider response to RawContributionCalendar.

        The provider returns `total` keyed by year plus "lastYear", and a
        flat `contributions` list of {date, count}. A missing list means no
        days; individual days with a non-string date are kept with an empty
        date so the aggregator skips them like any other unparsable date.
        """
        if not isinstance(data, dict):
            raise MalformedPayloadError("contributions payload is not an object")

        totals = data.get("total")
        rolling_total = coerce_count(totals.get("lastYear")) if isinstance(totals, dict) else 0

        raw_days = data.get("contributions")
        if raw_days is None:
            raw_days = []
        if not isinstance(raw_days, list):
            raise MalformedPayloadError("contributions list is not a list")

        days = []
        for day in raw_days:
            if not isinstance(day, dict):
                continue
            date = day.get("date")
            days.append(
                RawContributionDay(
                    date=date if isinstance(date, str) else "",
                    count=coerce_count(day.get("count")),
                )
            )
        return RawContributionCalendar(rolling_total=rolling_total, days=days)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def _get_json(
        self,
        identity: str,
        source: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, str | int] | None = None,
    ) -> Any:
        """GET a JSON document, mapping every failure to ActivityFetchError."""
        client = get_http_client(self.config)
        try:
            response = await client.get(url, headers=headers, params=params)
            handle_error_response(response, f"{source} for {identity}")
            return response.json()
        except GitHubAPIError as e:
            raise ActivityFetchError(identity, source, e.message) from e
        except httpx.HTTPError as e:
            raise ActivityFetchError(identity, source, f"transport error: {e!r}") from e
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise ActivityFetchError(identity, source, "response is not valid JSON") from e

    async def get_profile(self, identity: str) -> RawProfile:
        """Fetch the profile summary for a user."""
        data = await self._get_json(
            identity,
            SOURCE_PROFILE,
            f"{self.config.github_api_url}/users/{identity}",
            self._github_headers,
        )
        try:
            return self._normalize_profile(data)
        except MalformedPayloadError as e:
            raise ActivityFetchError(identity, SOURCE_PROFILE, str(e)) from e

    async def get_repositories(self, identity: str) -> list[RawRepository]:
        """Fetch a single bounded page of the user's public repositories."""
        data = await self._get_json(
            identity,
            SOURCE_REPOSITORIES,
            f"{self.config.github_api_url}/users/{identity}/repos",
            self._github_headers,
            params={"per_page": self.config.repos_per_page},
        )
        try:
            return self._normalize_repos(data)
        except MalformedPayloadError as e:
            raise ActivityFetchError(identity, SOURCE_REPOSITORIES, str(e)) from e

    async def get_contribution_calendar(self, identity: str) -> RawContributionCalendar:
        """Fetch the daily contribution calendar for a user."""
        data = await self._get_json(
            identity,
            SOURCE_CONTRIBUTIONS,
            f"{self.config.contributions_api_url}/{identity}",
            self._contributions_headers,
        )
        try:
            return self._normalize_calendar(data)
        except MalformedPayloadError as e:
            raise ActivityFetchError(identity, SOURCE_CONTRIBUTIONS, str(e)) from e

    async def fetch(self, identity: str) -> RawActivity:
        """
        Fetch all three activity sources concurrently.

        Args:
            identity: GitHub login

        Returns:
            RawActivity with profile, repositories and contribution calendar

        Raises:
            ActivityFetchError: If the identity is invalid or any source fails.
                A partial result is never returned.
        """
        if not is_valid_username(identity):
            raise ActivityFetchError(identity, SOURCE_PROFILE, "invalid GitHub username")

        results = await asyncio.gather(
            self.get_profile(identity),
            self.get_repositories(identity),
            self.get_contribution_calendar(identity),
            return_exceptions=True,
        )

        sources = (SOURCE_PROFILE, SOURCE_REPOSITORIES, SOURCE_CONTRIBUTIONS)
        for source, result in zip(sources, results, strict=True):
            if isinstance(result, ActivityFetchError):
                logger.warning(f"Activity fetch failed: {result}")
                raise result
            if isinstance(result, Exception):
                logger.exception(
                    f"Unexpected error fetching {source} for {identity}", exc_info=result
                )
                raise ActivityFetchError(
                    identity, source, f"unexpected error: {result!r}"
                ) from result
            if isinstance(result, BaseException):
                # Cancellation and interpreter exits are not fetch failures
                raise result

        profile, repositories, calendar = results
        logger.info(
            f"Fetched activity for {identity}: {len(repositories)} repos, "
            f"{len(calendar.days)} contribution days"
        )
        return RawActivity(profile=profile, repositories=repositories, calendar=calendar)
