import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.candidate.model import JobSeekerProfile
from models.candidate.repository import get_candidate_profile
from models.jobs.model import JobPosting
from models.jobs.repository import get_job_posting, get_active_job_postings
from models.applications.repository import get_applications_for_job
from models.matching.scorer import BASE_SCORE, calculate_match_score, skill_match, utc_now

logger = logging.getLogger(__name__)


def score_profile_against_job(
    profile: JobSeekerProfile,
    job: JobPosting,
    now: Optional[datetime] = None
) -> int:
    return calculate_match_score(
        candidate_skills=[s.name for s in profile.skills],
        experiences=profile.experiences,
        education_count=len(profile.educations),
        required_skills=[s.name for s in job.required_skills],
        now=now
    )


async def score_candidate_for_job(
    db: AsyncSession,
    profile_id: str,
    job_id: str
) -> int:
    """Match score for stored records: 0 if either is missing, the base score on DB errors."""
    try:
        profile = await get_candidate_profile(db, profile_id)
        job = await get_job_posting(db, job_id)
    except SQLAlchemyError:
        logger.exception("Error loading records for match score (profile=%s, job=%s)", profile_id, job_id)
        return BASE_SCORE

    if profile is None or job is None:
        logger.warning("Match score requested for missing record (profile=%s, job=%s)", profile_id, job_id)
        return 0

    return score_profile_against_job(profile, job)


async def rank_jobs_for_candidate(
    db: AsyncSession,
    profile: JobSeekerProfile,
    limit: int = 10
) -> List[Dict]:
    jobs = await get_active_job_postings(db)
    candidate_skills = [s.name for s in profile.skills]
    now = utc_now()

    results = []
    for job in jobs:
        matched, missing = skill_match(candidate_skills, [s.name for s in job.required_skills])
        results.append({
            "job_id": job.id,
            "title": job.title,
            "company": job.company,
            "location": job.location,
            "match_score": score_profile_against_job(profile, job, now=now),
            "matched_skills": matched,
            "missing_skills": missing
        })

    results.sort(key=lambda x: x["match_score"], reverse=True)
    logger.info("Ranked %d active postings for candidate %s", len(results), profile.id)
    return results[:limit]


async def rank_candidates_for_job(
    db: AsyncSession,
    job: JobPosting,
    limit: int = 10
) -> List[Dict]:
    applications = await get_applications_for_job(db, job.id)
    required = [s.name for s in job.required_skills]
    now = utc_now()

    results = []
    for application in applications:
        profile = application.job_seeker_profile
        matched, missing = skill_match([s.name for s in profile.skills], required)
        results.append({
            "application_id": application.id,
            "candidate_id": profile.id,
            "name": profile.name,
            "email": profile.email,
            "status": application.status,
            "current_position": profile.title,
            "match_score": score_profile_against_job(profile, job, now=now),
            "matched_skills": matched,
            "missing_skills": missing
        })

    results.sort(key=lambda x: x["match_score"], reverse=True)
    logger.info("Ranked %d applicants for posting %s", len(results), job.id)
    return results[:limit]
