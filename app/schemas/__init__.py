"""Pydantic schemas for API request/response validation."""

from app.schemas.activity import (
    ActivityCountersSchema,
    ActivityStateResponse,
    ActivitySummarySchema,
    LanguageShareSchema,
    MonthlyContributionSchema,
)

__all__ = [
    "ActivityCountersSchema",
    "ActivityStateResponse",
    "ActivitySummarySchema",
    "LanguageShareSchema",
    "MonthlyContributionSchema",
]
