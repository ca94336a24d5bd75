"""Data types for the raw activity payloads.

These are the normalized forms of the three provider responses. Only the
fields the activity summary consumes are kept; everything else in the
payloads is ignored.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawProfile:
    """Profile summary for a GitHub user."""

    public_repo_count: int = 0
    follower_count: int = 0


@dataclass(frozen=True)
class RawRepository:
    """One repository from the user's repository page."""

    star_count: int = 0
    primary_language: str | None = None


@dataclass(frozen=True)
class RawContributionDay:
    """One day of the contribution calendar."""

    date: str  # Calendar date string, e.g. "2024-01-05"; not validated here
    count: int = 0


@dataclass(frozen=True)
class RawContributionCalendar:
    """Contribution calendar for a user."""

    rolling_total: int = 0  # Provider's pre-aggregated rolling-year total
    days: list[RawContributionDay] = field(default_factory=list)


@dataclass(frozen=True)
class RawActivity:
    """All three sources from one successful fetch."""

    profile: RawProfile
    repositories: list[RawRepository]
    calendar: RawContributionCalendar
