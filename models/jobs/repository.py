from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.jobs.model import JobPosting


async def get_job_posting(
    db: AsyncSession,
    job_id: str
) -> Optional[JobPosting]:
    result = await db.execute(
        select(JobPosting)
        .where(JobPosting.id == job_id)
        .options(selectinload(JobPosting.required_skills))
    )
    return result.scalars().first()


async def get_active_job_postings(db: AsyncSession) -> List[JobPosting]:
    result = await db.execute(
        select(JobPosting)
        .where(JobPosting.is_active.is_(True))
        .options(selectinload(JobPosting.required_skills))
        .order_by(JobPosting.created_at.desc())
    )
    return list(result.scalars().all())
