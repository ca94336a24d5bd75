"""
Activity aggregation.

Folds the three raw activity payloads into one ActivitySummary:
- Counters: repository count, total stars, followers, rolling contributions
- Language distribution: repositories per primary language, with colors
- Monthly series: contributions per calendar month, Jan to Dec

Pure functions only: no I/O, no state between calls. Aggregation never
fails on well-typed input; malformed individual days are skipped.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from app.services.activity.types import (
    ActivityCounters,
    ActivitySummary,
    LanguageShare,
    MonthlyContribution,
)
from app.services.github.constants import language_color
from app.services.github.types import (
    RawActivity,
    RawContributionDay,
    RawProfile,
    RawRepository,
)

# Fixed, locale-independent month labels in calendar order
MONTH_LABELS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def month_label(date: str) -> str | None:
    """
    Return the three-letter month label for a date string.

    Accepts ISO 8601 dates ("2024-01-05") and datetimes. The month is taken
    from the string as written, without timezone conversion.

    Returns:
        Month label, or None if the date cannot be parsed
    """
    try:
        parsed = datetime.fromisoformat(date)
    except (TypeError, ValueError):
        return None
    return MONTH_LABELS[parsed.month - 1]


def build_counters(
    profile: RawProfile,
    repositories: Sequence[RawRepository],
    rolling_total: int = 0,
) -> ActivityCounters:
    """Compute the headline counters.

    `total_contributions` is the provider's rolling-year total taken as is.
    It is not recomputed from the per-day records, so it can differ from
    the sum of the monthly series.
    """
    return ActivityCounters(
        repositories=len(repositories),
        total_stars=sum(max(repo.star_count or 0, 0) for repo in repositories),
        followers=max(profile.follower_count or 0, 0),
        total_contributions=max(rolling_total or 0, 0),
    )


def build_language_distribution(
    repositories: Iterable[RawRepository],
) -> tuple[LanguageShare, ...]:
    """Count repositories per primary language.

    Names are matched exactly (case-sensitive). Repositories without a
    language are left out. Entries come out in order of first occurrence,
    not sorted by name or count, so the chart keeps the order the
    repositories were listed in.
    """
    totals: dict[str, int] = {}
    for repo in repositories:
        if not repo.primary_language:
            continue
        totals[repo.primary_language] = totals.get(repo.primary_language, 0) + 1

    return tuple(
        LanguageShare(language_name=name, count=count, color_token=language_color(name))
        for name, count in totals.items()
    )


def build_monthly_series(
    days: Iterable[RawContributionDay],
) -> tuple[MonthlyContribution, ...]:
    """Sum contributions per calendar month.

    Days from different years fall into the same month bucket. Days with an
    unparsable date are skipped. Months with a zero total are omitted.
    """
    totals: dict[str, int] = {}
    for day in days:
        label = month_label(day.date)
        if label is None:
            continue
        totals[label] = totals.get(label, 0) + max(day.count or 0, 0)

    return tuple(
        MonthlyContribution(month_label=label, contributions=totals[label])
        for label in MONTH_LABELS
        if totals.get(label)
    )


def aggregate(
    profile: RawProfile,
    repositories: Sequence[RawRepository],
    days: Iterable[RawContributionDay],
    rolling_total: int = 0,
) -> ActivitySummary:
    """
    Build an ActivitySummary from raw payloads.

    Args:
        profile: Profile summary
        repositories: One page of repositories
        days: Contribution days, in any order
        rolling_total: Provider's rolling-year contribution total

    Returns:
        Fully populated ActivitySummary (empty inputs give empty sequences
        and zero counters, never None)
    """
    return ActivitySummary(
        counters=build_counters(profile, repositories, rolling_total),
        monthly_series=build_monthly_series(days),
        language_distribution=build_language_distribution(repositories),
    )


def aggregate_activity(raw: RawActivity) -> ActivitySummary:
    """Build an ActivitySummary from a complete fetch result."""
    return aggregate(
        raw.profile,
        raw.repositories,
        raw.calendar.days,
        rolling_total=raw.calendar.rolling_total,
    )
