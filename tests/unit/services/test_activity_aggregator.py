"""Unit tests for activity aggregation.

Pure functions only — no mocks needed.
"""

from __future__ import annotations

from app.services.activity.aggregator import (
    MONTH_LABELS,
    aggregate,
    aggregate_activity,
    build_counters,
    build_language_distribution,
    build_monthly_series,
    month_label,
)
from app.services.activity.types import (
    ActivityCounters,
    ActivitySummary,
    LanguageShare,
    MonthlyContribution,
)
from app.services.github.constants import DEFAULT_LANGUAGE_COLOR
from app.services.github.types import RawProfile

from tests.helpers.activity_factories import make_days, make_raw_activity, make_repos


# ═══════════════════════════════════════════════════════════════════════════
# month_label
# ═══════════════════════════════════════════════════════════════════════════


class TestMonthLabel:
    """Tests for date → month label truncation."""

    def test_plain_date(self):
        assert month_label("2024-01-05") == "Jan"
        assert month_label("2023-12-31") == "Dec"

    def test_datetime_string(self):
        assert month_label("2024-07-01T23:30:00") == "Jul"

    def test_month_is_not_shifted_by_timezone(self):
        assert month_label("2024-03-31T23:59:59-08:00") == "Mar"

    def test_unparsable_returns_none(self):
        assert month_label("not-a-date") is None
        assert month_label("2024-13-01") is None
        assert month_label("") is None

    def test_labels_are_fixed_english_tokens(self):
        assert MONTH_LABELS == (
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        )  # fmt: skip


# ═══════════════════════════════════════════════════════════════════════════
# Counters
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildCounters:
    """Tests for headline counters."""

    def test_star_sum_includes_repos_without_language(self):
        repos = make_repos((5, "TypeScript"), (3, None), (10, "Go"))
        counters = build_counters(RawProfile(follower_count=4), repos, rolling_total=99)

        assert counters == ActivityCounters(
            repositories=3,
            total_stars=18,
            followers=4,
            total_contributions=99,
        )

    def test_repository_count_is_page_length_not_profile_count(self):
        profile = RawProfile(public_repo_count=50, follower_count=0)
        counters = build_counters(profile, make_repos((1, "Python")))

        assert counters.repositories == 1

    def test_rolling_total_defaults_to_zero(self):
        assert build_counters(RawProfile(), []).total_contributions == 0


# ═══════════════════════════════════════════════════════════════════════════
# Language distribution
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildLanguageDistribution:
    """Tests for per-language repository counts."""

    def test_counts_partition_language_bearing_repos(self):
        repos = make_repos(
            (1, "Python"), (0, None), (2, "Go"), (0, "Python"), (4, None), (0, "Go"), (0, "Go")
        )
        dist = build_language_distribution(repos)

        assert sum(share.count for share in dist) == 5
        assert {share.language_name: share.count for share in dist} == {"Python": 2, "Go": 3}

    def test_emits_in_first_seen_order(self):
        repos = make_repos((0, "Rust"), (0, "Python"), (0, "Python"), (0, "CSS"), (0, "Rust"))
        dist = build_language_distribution(repos)

        assert [share.language_name for share in dist] == ["Rust", "Python", "CSS"]

    def test_names_are_case_sensitive(self):
        dist = build_language_distribution(make_repos((0, "Python"), (0, "python")))

        assert [(s.language_name, s.count) for s in dist] == [("Python", 1), ("python", 1)]

    def test_known_languages_get_table_colors(self):
        dist = build_language_distribution(make_repos((0, "TypeScript"), (0, "Python")))

        assert dist == (
            LanguageShare(language_name="TypeScript", count=1, color_token="#3178c6"),
            LanguageShare(language_name="Python", count=1, color_token="#3776AB"),
        )

    def test_unknown_language_gets_fallback_color(self):
        dist = build_language_distribution(make_repos((0, "Zig"), (0, "Go")))

        assert {share.color_token for share in dist} == {DEFAULT_LANGUAGE_COLOR}

    def test_empty_language_is_excluded(self):
        assert build_language_distribution(make_repos((3, ""), (1, None))) == ()


# ═══════════════════════════════════════════════════════════════════════════
# Monthly series
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildMonthlySeries:
    """Tests for contributions-per-month bucketing."""

    def test_zero_total_month_is_omitted(self):
        days = make_days(("2024-01-05", 3), ("2024-01-20", 2), ("2024-03-01", 0))

        assert build_monthly_series(days) == (
            MonthlyContribution(month_label="Jan", contributions=5),
        )

    def test_ordered_by_calendar_month_regardless_of_input_order(self):
        days = make_days(
            ("2024-11-02", 1), ("2024-02-10", 4), ("2023-12-25", 2), ("2024-02-11", 1)
        )
        series = build_monthly_series(days)

        assert [m.month_label for m in series] == ["Feb", "Nov", "Dec"]
        assert [m.contributions for m in series] == [5, 1, 2]

    def test_same_month_in_different_years_shares_a_bucket(self):
        days = make_days(("2023-06-01", 2), ("2024-06-30", 5))

        assert build_monthly_series(days) == (
            MonthlyContribution(month_label="Jun", contributions=7),
        )

    def test_unparsable_days_are_skipped(self):
        days = make_days(("2024-04-01", 3), ("garbage", 100), ("", 7), ("2024-04-31", 9))
        series = build_monthly_series(days)

        assert series == (MonthlyContribution(month_label="Apr", contributions=3),)

    def test_sum_equals_sum_of_valid_days(self):
        days = make_days(
            ("2024-01-01", 1), ("2024-05-05", 2), ("bad", 50), ("2024-09-09", 3), ("2024-12-12", 4)
        )

        assert sum(m.contributions for m in build_monthly_series(days)) == 10

    def test_empty_days(self):
        assert build_monthly_series([]) == ()


# ═══════════════════════════════════════════════════════════════════════════
# aggregate
# ═══════════════════════════════════════════════════════════════════════════


class TestAggregate:
    """End-to-end aggregation scenarios."""

    def test_repository_scenario(self):
        repos = make_repos((5, "TypeScript"), (3, "TypeScript"), (0, None))
        summary = aggregate(RawProfile(), repos, [])

        assert summary.counters.total_stars == 8
        assert summary.counters.repositories == 3
        assert [(s.language_name, s.count) for s in summary.language_distribution] == [
            ("TypeScript", 2)
        ]

    def test_empty_inputs_with_profile(self):
        summary = aggregate(RawProfile(public_repo_count=7, follower_count=42), [], [])

        assert summary == ActivitySummary(
            counters=ActivityCounters(
                repositories=0, total_stars=0, followers=42, total_contributions=0
            ),
            monthly_series=(),
            language_distribution=(),
        )

    def test_rolling_total_is_not_reconciled_with_days(self):
        days = make_days(("2024-01-01", 10), ("2024-02-01", 5))
        summary = aggregate(RawProfile(), [], days, rolling_total=400)

        assert summary.counters.total_contributions == 400
        assert sum(m.contributions for m in summary.monthly_series) == 15

    def test_is_idempotent(self):
        repos = make_repos((1, "Go"), (2, "Python"), (3, "Go"), (4, None))
        days = make_days(("2024-08-01", 2), ("2024-01-09", 1), ("nope", 3))

        first = aggregate(RawProfile(follower_count=3), repos, days, rolling_total=12)
        second = aggregate(RawProfile(follower_count=3), repos, days, rolling_total=12)

        assert first == second

    def test_does_not_mutate_inputs(self):
        repos = make_repos((1, "Go"), (2, None))
        days = make_days(("2024-08-01", 2))
        repos_before, days_before = list(repos), list(days)

        aggregate(RawProfile(), repos, days)

        assert repos == repos_before
        assert days == days_before

    def test_aggregate_activity_uses_calendar_total(self):
        raw = make_raw_activity(
            followers=9,
            repos=make_repos((2, "Java")),
            days=make_days(("2024-10-10", 6)),
            rolling_total=321,
        )
        summary = aggregate_activity(raw)

        assert summary.counters == ActivityCounters(
            repositories=1, total_stars=2, followers=9, total_contributions=321
        )
        assert summary.monthly_series == (
            MonthlyContribution(month_label="Oct", contributions=6),
        )
        assert summary.language_distribution == (
            LanguageShare(language_name="Java", count=1, color_token="#b07219"),
        )
