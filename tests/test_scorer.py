"""
Tests for models/matching/scorer.py - candidate/job match scoring.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from models.matching.scorer import (
    calculate_match_score,
    experience_years,
    normalize_skills,
    skill_match,
    utc_now,
)

NOW = datetime(2024, 6, 1)


def interval(start, end=None):
    return {"start_date": start, "end_date": end}


class TestSkillContribution:
    """Test the skills part of the score."""

    def test_no_skills_anywhere_gives_base_score(self):
        assert calculate_match_score([], [], 0, [], now=NOW) == 50

    def test_all_required_skills_matched_adds_30(self):
        score = calculate_match_score(["Python", "SQL", "Docker"], [], 0, ["Python", "SQL", "Docker"], now=NOW)
        assert score == 80

    def test_no_required_skills_matched_adds_nothing(self):
        score = calculate_match_score(["Cobol"], [], 0, ["Python", "SQL", "Docker"], now=NOW)
        assert score == 50

    def test_partial_match_is_proportional(self):
        assert calculate_match_score(["Python"], [], 0, ["Python", "SQL", "Docker"], now=NOW) == 60
        assert calculate_match_score(["Python", "SQL"], [], 0, ["Python", "SQL", "Docker"], now=NOW) == 70

    def test_matching_ignores_case_and_whitespace(self):
        score = calculate_match_score(["  python ", "sql"], [], 0, ["Python", "SQL"], now=NOW)
        assert score == 80

    def test_extra_candidate_skills_do_not_raise_the_score(self):
        score = calculate_match_score(["Python", "Go", "Rust", "C"], [], 0, ["Python"], now=NOW)
        assert score == 80

    def test_duplicate_required_skills_count_once(self):
        score = calculate_match_score(["Python"], [], 0, ["Python", "python", "SQL"], now=NOW)
        assert score == 65

    def test_without_requirements_each_skill_adds_two_points(self):
        assert calculate_match_score(["a", "b", "c"], [], 0, [], now=NOW) == 56

    def test_without_requirements_skill_points_cap_at_15(self):
        skills = [f"skill-{i}" for i in range(20)]
        assert calculate_match_score(skills, [], 0, [], now=NOW) == 65

    def test_fractional_points_round_to_nearest(self):
        # 3 of 20 required: 4.5 points
        required = [f"skill-{i}" for i in range(20)]
        assert calculate_match_score(required[:3], [], 0, required, now=NOW) == 55


class TestExperienceContribution:
    """Test the experience part of the score."""

    def test_closed_interval_counts_three_points_per_year(self):
        experiences = [interval(datetime(2020, 1, 1), datetime(2022, 1, 1))]
        assert calculate_match_score([], experiences, 0, [], now=NOW) == 56

    def test_open_interval_runs_until_now(self):
        experiences = [interval(NOW - timedelta(days=730))]
        assert experience_years(experiences, now=NOW) == pytest.approx(2.0)
        assert calculate_match_score([], experiences, 0, [], now=NOW) == 56

    def test_intervals_are_summed(self):
        experiences = [
            interval(datetime(2018, 1, 1), datetime(2019, 1, 1)),
            interval(datetime(2020, 1, 1), datetime(2021, 1, 1)),
        ]
        assert experience_years(experiences, now=NOW) == pytest.approx(2.0, abs=0.01)

    def test_experience_points_cap_at_15(self):
        experiences = [interval(datetime(2000, 1, 1), datetime(2020, 1, 1))]
        assert calculate_match_score([], experiences, 0, [], now=NOW) == 65

    def test_dates_are_accepted(self):
        experiences = [interval(date(2020, 1, 1), date(2021, 1, 1))]
        assert experience_years(experiences, now=NOW) == pytest.approx(366 / 365)

    def test_objects_with_date_attributes_are_accepted(self):
        class Row:
            start_date = datetime(2020, 1, 1)
            end_date = datetime(2021, 1, 1)

        assert experience_years([Row()], now=NOW) == pytest.approx(366 / 365)

    def test_reversed_interval_adds_nothing(self):
        experiences = [interval(datetime(2022, 1, 1), datetime(2020, 1, 1))]
        assert experience_years(experiences, now=NOW) == 0
        assert calculate_match_score([], experiences, 0, [], now=NOW) == 50

    def test_interval_without_start_is_skipped(self):
        assert experience_years([interval(None, datetime(2020, 1, 1))], now=NOW) == 0

    def test_aware_start_with_naive_end(self):
        experiences = [interval(datetime(2020, 1, 1, tzinfo=timezone.utc), datetime(2021, 1, 1))]
        assert experience_years(experiences, now=NOW) == pytest.approx(366 / 365)

    def test_naive_start_with_aware_end(self):
        experiences = [interval(datetime(2020, 1, 1), datetime(2021, 1, 1, tzinfo=timezone.utc))]
        assert experience_years(experiences, now=NOW) == pytest.approx(366 / 365)

    def test_aware_dates_are_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        # 02:00 at UTC+2 is midnight UTC
        experiences = [interval(datetime(2020, 1, 1, 2, tzinfo=plus_two), datetime(2021, 1, 1))]
        assert experience_years(experiences, now=NOW) == pytest.approx(366 / 365)

    def test_aware_open_interval_with_naive_now(self):
        experiences = [interval(datetime(2022, 6, 1, tzinfo=timezone.utc))]
        assert experience_years(experiences, now=NOW) == pytest.approx(731 / 365)
        assert calculate_match_score([], experiences, 0, [], now=NOW) == 56

    def test_naive_open_interval_with_aware_now(self):
        experiences = [interval(datetime(2022, 6, 1))]
        aware_now = NOW.replace(tzinfo=timezone.utc)
        assert experience_years(experiences, now=aware_now) == pytest.approx(731 / 365)

    def test_open_interval_defaults_to_current_utc_time(self):
        experiences = [interval(datetime(2020, 1, 1, tzinfo=timezone.utc))]
        expected = (utc_now() - datetime(2020, 1, 1)).days / 365
        assert experience_years(experiences) == pytest.approx(expected, abs=0.01)


class TestUtcNow:

    def test_is_naive_utc(self):
        now = utc_now()
        assert now.tzinfo is None
        assert abs(now - datetime.now(timezone.utc).replace(tzinfo=None)) < timedelta(seconds=5)


class TestEducationContribution:
    """Test the education part of the score."""

    def test_any_education_adds_five(self):
        assert calculate_match_score([], [], 1, [], now=NOW) == 55

    def test_several_educations_still_add_five(self):
        assert calculate_match_score([], [], 4, [], now=NOW) == 55


class TestMissingInput:
    """Missing collections degrade to the base score."""

    def test_none_everywhere(self):
        assert calculate_match_score(None, None, None, None, now=NOW) == 50

    def test_none_skills_with_requirements(self):
        assert calculate_match_score(None, None, 0, ["Python"], now=NOW) == 50

    def test_empty_skill_names_are_ignored(self):
        assert normalize_skills(["", None, " ", "Python"]) == ["python"]


class TestBounds:
    """Score always stays within [0, 100]."""

    def test_everything_maxed_gives_100(self):
        experiences = [interval(datetime(2000, 1, 1), datetime(2020, 1, 1))]
        assert calculate_match_score(["Python"], experiences, 3, ["Python"], now=NOW) == 100

    @pytest.mark.parametrize("matched", [0, 1, 2, 3])
    @pytest.mark.parametrize("years", [0, 1, 3, 10, 40])
    @pytest.mark.parametrize("education_count", [0, 1])
    def test_score_in_range(self, matched, years, education_count):
        required = ["a", "b", "c"]
        experiences = [interval(NOW - timedelta(days=365 * years))] if years else []
        score = calculate_match_score(required[:matched], experiences, education_count, required, now=NOW)
        assert isinstance(score, int)
        assert 0 <= score <= 100


class TestSkillMatch:
    """Test the matched/missing split."""

    def test_split_preserves_required_order(self):
        matched, missing = skill_match(["docker", "Python"], ["Python", "SQL", "Docker"])
        assert matched == ["python", "docker"]
        assert missing == ["sql"]

    def test_no_requirements(self):
        assert skill_match(["Python"], None) == ([], [])
