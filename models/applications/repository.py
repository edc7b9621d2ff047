from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.applications.model import Application
from models.candidate.model import JobSeekerProfile


async def find_application(
    db: AsyncSession,
    job_id: str,
    profile_id: str
) -> Optional[Application]:
    result = await db.execute(
        select(Application).where(
            Application.job_posting_id == job_id,
            Application.job_seeker_profile_id == profile_id
        )
    )
    return result.scalars().first()


async def get_applications_for_job(
    db: AsyncSession,
    job_id: str
) -> List[Application]:
    """Applications of one posting, each with its candidate's scoring data loaded."""
    result = await db.execute(
        select(Application)
        .where(Application.job_posting_id == job_id)
        .options(
            selectinload(Application.job_seeker_profile).selectinload(JobSeekerProfile.skills),
            selectinload(Application.job_seeker_profile).selectinload(JobSeekerProfile.experiences),
            selectinload(Application.job_seeker_profile).selectinload(JobSeekerProfile.educations),
        )
        .order_by(Application.applied_at.asc())
    )
    return list(result.scalars().all())
