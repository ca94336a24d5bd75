"""Data types for the activity summary and its display state."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class ActivityCounters:
    """Headline counters shown as stat cards."""

    repositories: int = 0
    total_stars: int = 0
    followers: int = 0
    total_contributions: int = 0


@dataclass(frozen=True)
class MonthlyContribution:
    """One bar of the monthly contributions chart."""

    month_label: str  # "Jan".."Dec"
    contributions: int


@dataclass(frozen=True)
class LanguageShare:
    """One slice of the language distribution chart."""

    language_name: str
    count: int  # Number of repositories with this primary language
    color_token: str  # Hex color for display


@dataclass(frozen=True)
class ActivitySummary:
    """Display-ready activity summary computed from one fetch cycle."""

    counters: ActivityCounters = field(default_factory=ActivityCounters)
    monthly_series: tuple[MonthlyContribution, ...] = ()
    language_distribution: tuple[LanguageShare, ...] = ()


class ActivityStatus(str, Enum):
    """Status of the displayed summary."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ActivityState:
    """The summary currently shown for an identity, plus its status."""

    identity: str
    status: ActivityStatus = ActivityStatus.LOADING
    summary: ActivitySummary = field(default_factory=ActivitySummary)
    error: str | None = None
    updated_at: datetime | None = None  # When `summary` was last replaced
