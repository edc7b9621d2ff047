# models/matching/scorer.py

import math
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Optional, Tuple

BASE_SCORE = 50
MAX_SKILL_POINTS = 30
SKILL_POINTS_WEIGHT = 0.3
MAX_UNSPECIFIED_SKILL_POINTS = 15
POINTS_PER_SKILL = 2
MAX_EXPERIENCE_POINTS = 15
POINTS_PER_YEAR = 3
EDUCATION_POINTS = 5
DAYS_PER_YEAR = 365


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the convention used for every stored date."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _as_datetime(value: date | datetime) -> datetime:
    # Aware values are converted to naive UTC so they compare with naive ones
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def _interval_bounds(interval: Any) -> Tuple[Optional[datetime], Optional[datetime]]:
    # Rows from the ORM and plain dicts from JSON bodies are both accepted
    if isinstance(interval, dict):
        start, end = interval.get("start_date"), interval.get("end_date")
    else:
        start, end = getattr(interval, "start_date", None), getattr(interval, "end_date", None)
    return (
        _as_datetime(start) if start else None,
        _as_datetime(end) if end else None,
    )


def normalize_skills(skills: Optional[Iterable[str]]) -> List[str]:
    """Lowercase, strip and de-duplicate skill names, keeping first-seen order."""
    seen = []
    for skill in skills or []:
        if not skill:
            continue
        name = skill.strip().lower()
        if name and name not in seen:
            seen.append(name)
    return seen


def skill_match(
    candidate_skills: Optional[Iterable[str]],
    required_skills: Optional[Iterable[str]]
) -> Tuple[List[str], List[str]]:
    """Split the required skills into (matched, missing), both lowercased."""
    candidate = set(normalize_skills(candidate_skills))
    required = normalize_skills(required_skills)

    matched = [s for s in required if s in candidate]
    missing = [s for s in required if s not in candidate]
    return matched, missing


def experience_years(
    experiences: Optional[Iterable[Any]],
    now: Optional[datetime] = None
) -> float:
    """
    Total years covered by the experience intervals. An open interval runs
    until ``now`` (default: the current UTC time). Aware dates are converted
    to UTC, naive dates are taken to be UTC already. Intervals without a
    start date, or ending before they start, add nothing.
    """
    total = 0.0
    for interval in experiences or []:
        start, end = _interval_bounds(interval)
        if start is None:
            continue
        if end is None:
            end = _as_datetime(now) if now else utc_now()
        days = (end - start).total_seconds() / 86400
        total += max(days, 0) / DAYS_PER_YEAR
    return total


def calculate_match_score(
    candidate_skills: Optional[Iterable[str]],
    experiences: Optional[Iterable[Any]],
    education_count: Optional[int],
    required_skills: Optional[Iterable[str]],
    now: Optional[datetime] = None
) -> int:
    """
    Heuristic 0-100 compatibility between a candidate and a job posting.

    Starts from 50, adds up to 30 points for the share of required skills the
    candidate has (or up to 15 for simply listing skills when the posting
    requires none), up to 15 points for years of experience and 5 points for
    any education entry.
    """
    score = float(BASE_SCORE)

    required = normalize_skills(required_skills)
    if required:
        matched, _ = skill_match(candidate_skills, required)
        skill_pct = len(matched) / len(required) * 100
        score += min(skill_pct * SKILL_POINTS_WEIGHT, MAX_SKILL_POINTS)
    else:
        candidate_count = len(normalize_skills(candidate_skills))
        score += min(candidate_count * POINTS_PER_SKILL, MAX_UNSPECIFIED_SKILL_POINTS)

    years = experience_years(experiences, now=now)
    score += min(years * POINTS_PER_YEAR, MAX_EXPERIENCE_POINTS)

    if education_count and education_count > 0:
        score += EDUCATION_POINTS

    score = max(0.0, min(score, 100.0))
    # Halves round up
    return int(math.floor(score + 0.5))
