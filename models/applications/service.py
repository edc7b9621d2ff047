import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.applications.model import Application, STATUS_APPLIED
from models.applications.repository import find_application
from models.candidate.repository import get_candidate_profile
from models.jobs.repository import get_job_posting
from models.matching.service import score_profile_against_job

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    pass


class DuplicateApplicationError(ValueError):
    pass


async def create_application(
    db: AsyncSession,
    profile_id: str,
    job_id: str,
    cover_letter: Optional[str] = None
) -> Application:
    profile = await get_candidate_profile(db, profile_id)
    if profile is None:
        raise RecordNotFoundError(f"Job seeker profile not found: {profile_id}")

    job = await get_job_posting(db, job_id)
    if job is None or not job.is_active:
        raise RecordNotFoundError(f"Job posting not found: {job_id}")

    if await find_application(db, job_id, profile_id) is not None:
        raise DuplicateApplicationError("Candidate has already applied for this job")

    match_score = score_profile_against_job(profile, job)

    application = Application(
        job_posting_id=job_id,
        job_seeker_profile_id=profile_id,
        status=STATUS_APPLIED,
        cover_letter=cover_letter,
        match_score=match_score
    )
    db.add(application)
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent request inserted the same (job, candidate) pair first
        await db.rollback()
        logger.warning("Duplicate application rejected on insert (profile=%s, job=%s)", profile_id, job_id)
        raise DuplicateApplicationError("Candidate has already applied for this job")
    await db.refresh(application)

    logger.info(
        "Application %s created (profile=%s, job=%s, score=%d)",
        application.id, profile_id, job_id, match_score
    )
    return application
