"""Ratings and reviews: eligibility, narrative constraints, stable ids."""

import pandas as pd
import pytest

from config.company_profile import RATING_DISTRIBUTION
from synthetic_org.generators.identity import rating_id, review_id
from synthetic_org.generators.performance_generator import (
    PerformanceGenerator, band_for_score, performance_stats,
)
from synthetic_org.generators.temporal import employed_during


def _ratings_for(ratings, registry, email):
    emp = registry.get_by_email(email)
    return ratings[ratings["employee_id"] == emp.employee_id].set_index("review_cycle_id")


def test_every_rating_is_for_an_eligible_employee(ratings, registry):
    for row in ratings.itertuples():
        emp = registry.get_by_id(row.employee_id)
        cycle = registry.get_cycle(row.review_cycle_id)
        assert emp is not None and cycle is not None
        assert employed_during(emp, cycle.start_date, cycle.end_date)


def test_one_rating_per_employee_cycle(ratings):
    assert not ratings.duplicated(["employee_id", "review_cycle_id"]).any()


def test_root_is_never_rated(ratings, registry):
    assert registry.root().employee_id not in set(ratings["employee_id"])


def test_reviewer_is_the_manager(ratings, registry):
    for row in ratings.itertuples():
        assert row.reviewer_id == registry.get_by_id(row.employee_id).manager_id


def test_scores_in_range(ratings):
    for col in ["overall_rating", "goals_rating", "competency_rating"]:
        assert ratings[col].between(1.0, 5.0).all()
        assert (ratings[col] * 10).round(6).mod(1).eq(0).all()


def test_sub_scores_track_overall(ratings):
    assert (ratings["goals_rating"] - ratings["overall_rating"]).abs().max() <= 0.21
    assert (ratings["competency_rating"] - ratings["overall_rating"]).abs().max() <= 0.21


def test_submitted_within_two_weeks_of_cycle_end(ratings, registry):
    for row in ratings.itertuples():
        end = registry.get_cycle(row.review_cycle_id).end_date
        submitted = pd.Timestamp(row.submitted_at).date()
        assert 0 <= (end - submitted).days < 14


def test_sarah_and_elena_stay_high(ratings, registry):
    for email in ["sarah.chen@acmecorp.com", "elena.rodriguez@acmecorp.com"]:
        rows = _ratings_for(ratings, registry, email)
        assert len(rows) == 3
        assert (rows["overall_rating"] >= 4.5).all()


def test_marcus_underperforms_then_improves(ratings, registry):
    rows = _ratings_for(ratings, registry, "marcus.johnson@acmecorp.com")
    assert rows.loc["rc_2023_annual", "overall_rating"] <= 2.4
    assert rows.loc["rc_2024_annual", "overall_rating"] <= 2.4
    assert 2.5 <= rows.loc["rc_2025_q1", "overall_rating"] <= 2.9


def test_james_only_rated_after_joining(ratings, registry):
    rows = _ratings_for(ratings, registry, "james.park@acmecorp.com")
    assert sorted(rows.index) == ["rc_2024_annual", "rc_2025_q1"]
    assert rows["overall_rating"].between(2.7, 3.0).all()


def test_robert_steady(ratings, registry):
    rows = _ratings_for(ratings, registry, "robert.kim@acmecorp.com")
    assert len(rows) == 3
    assert rows["overall_rating"].between(3.4, 3.6).all()


def test_amanda_not_rated_after_leaving(ratings, registry):
    rows = _ratings_for(ratings, registry, "amanda.foster@acmecorp.com")
    assert sorted(rows.index) == ["rc_2023_annual", "rc_2024_annual"]


def test_ids_are_derived_from_pair(ratings, reviews):
    for row in ratings.itertuples():
        assert row.id == rating_id(row.employee_id, row.review_cycle_id)
    for row in reviews.itertuples():
        assert row.id == review_id(row.employee_id, row.review_cycle_id)


def test_every_rating_has_a_review(ratings, reviews):
    rating_pairs = set(zip(ratings["employee_id"], ratings["review_cycle_id"]))
    review_pairs = set(zip(reviews["employee_id"], reviews["review_cycle_id"]))
    assert rating_pairs == review_pairs
    assert list(reviews["submitted_at"]) == list(ratings["submitted_at"])


def test_review_sections_filled(reviews):
    for col in ["strengths", "areas_for_improvement", "accomplishments", "manager_comments"]:
        assert reviews[col].str.len().gt(0).all()
        assert not reviews[col].str.contains(r"\{\w+\}").any()


def test_manager_comment_uses_first_name(reviews, registry):
    sarah = registry.get_by_email("sarah.chen@acmecorp.com")
    comments = reviews.loc[reviews["employee_id"] == sarah.employee_id, "manager_comments"]
    assert len(comments) == 3
    for comment in comments:
        assert "Sarah" in comment


def test_band_distribution_roughly_on_target(ratings):
    stats = performance_stats(ratings)
    assert stats["total"] == len(ratings)
    assert sum(stats["distribution"].values()) == len(ratings)
    # Most ratings land in "meets"
    assert stats["distribution"]["meets"] == max(stats["distribution"].values())
    assert set(stats["by_cycle"]) == {"rc_2023_annual", "rc_2024_annual", "rc_2025_q1"}


def test_performance_stats_empty():
    assert performance_stats(pd.DataFrame())["total"] == 0


@pytest.mark.parametrize("score, band", [
    (5.0, "exceptional"), (4.8, "exceptional"), (4.7, "exceeds"), (4.0, "exceeds"),
    (3.9, "meets"), (3.0, "meets"), (2.9, "developing"), (1.9, "unsatisfactory"),
    (1.0, "unsatisfactory"),
])
def test_band_for_score(score, band):
    assert band_for_score(score) == band
    assert band in RATING_DISTRIBUTION


def test_regeneration_is_identical(registry, ratings, reviews):
    again = PerformanceGenerator(registry)
    again.generate()
    pd.testing.assert_frame_equal(again.dataframes["ratings"], ratings)
    pd.testing.assert_frame_equal(again.dataframes["reviews"], reviews)


def test_validate_passes(performance):
    assert performance.validate() == []
