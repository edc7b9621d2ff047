from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.candidate.model import JobSeekerProfile

# Collections the match scorer reads
PROFILE_SCORING_LOADS = (
    selectinload(JobSeekerProfile.skills),
    selectinload(JobSeekerProfile.experiences),
    selectinload(JobSeekerProfile.educations),
)


async def get_candidate_profile(
    db: AsyncSession,
    profile_id: str
) -> Optional[JobSeekerProfile]:
    stmt = (
        select(JobSeekerProfile)
        .where(JobSeekerProfile.id == profile_id)
        .options(*PROFILE_SCORING_LOADS)
    )

    result = await db.execute(stmt)
    return result.scalars().first()
