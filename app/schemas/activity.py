"""Pydantic schemas for the activity widget.

Keys are serialized in camelCase to match the frontend's naming
(e.g. `totalStars`, `monthlySeries`, `colorToken`).
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.services.activity.types import ActivityState, ActivitySummary


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ActivityCountersSchema(CamelModel):
    """Headline counters."""

    repositories: int = Field(ge=0)
    total_stars: int = Field(ge=0)
    followers: int = Field(ge=0)
    total_contributions: int = Field(ge=0)


class MonthlyContributionSchema(CamelModel):
    """Contributions for one calendar month."""

    month_label: str = Field(description="Three-letter month, 'Jan'..'Dec'")
    contributions: int = Field(ge=0)


class LanguageShareSchema(CamelModel):
    """Repositories per primary language."""

    language_name: str
    count: int = Field(ge=1)
    color_token: str = Field(description="Hex color for the chart slice, e.g. '#3178c6'")


class ActivitySummarySchema(CamelModel):
    """Display-ready activity summary."""

    counters: ActivityCountersSchema
    monthly_series: list[MonthlyContributionSchema]
    language_distribution: list[LanguageShareSchema]

    @classmethod
    def from_summary(cls, summary: ActivitySummary) -> "ActivitySummarySchema":
        counters = summary.counters
        return cls(
            counters=ActivityCountersSchema(
                repositories=counters.repositories,
                total_stars=counters.total_stars,
                followers=counters.followers,
                total_contributions=counters.total_contributions,
            ),
            monthly_series=[
                MonthlyContributionSchema(
                    month_label=month.month_label,
                    contributions=month.contributions,
                )
                for month in summary.monthly_series
            ],
            language_distribution=[
                LanguageShareSchema(
                    language_name=share.language_name,
                    count=share.count,
                    color_token=share.color_token,
                )
                for share in summary.language_distribution
            ],
        )


class ActivityStateResponse(CamelModel):
    """Current activity summary for an identity, with its status.

    On `error` the summary is the last good one (or the empty default) and
    `error` holds a generic user-facing message.
    """

    identity: str
    status: Literal["loading", "ready", "error"]
    summary: ActivitySummarySchema
    error: str | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_state(cls, state: ActivityState) -> "ActivityStateResponse":
        return cls(
            identity=state.identity,
            status=state.status.value,
            summary=ActivitySummarySchema.from_summary(state.summary),
            error=state.error,
            updated_at=state.updated_at,
        )
