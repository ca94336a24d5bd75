"""
Activity package.

Turns the raw GitHub activity sources into the portfolio's activity
summary and tracks what is currently displayed.

Module structure:
- aggregator.py: Pure aggregation into ActivitySummary
- service.py: Refresh cycles and per-identity display state
- types.py: Summary and state types
"""

from app.services.activity.aggregator import MONTH_LABELS, aggregate, aggregate_activity
from app.services.activity.service import (
    STATS_UNAVAILABLE_MESSAGE,
    ActivityService,
    activity_service,
)
from app.services.activity.types import (
    ActivityCounters,
    ActivityState,
    ActivityStatus,
    ActivitySummary,
    LanguageShare,
    MonthlyContribution,
)

__all__ = [
    "aggregate",
    "aggregate_activity",
    "ActivityService",
    "activity_service",
    "ActivityCounters",
    "ActivityState",
    "ActivityStatus",
    "ActivitySummary",
    "LanguageShare",
    "MonthlyContribution",
    "MONTH_LABELS",
    "STATS_UNAVAILABLE_MESSAGE",
]
