from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from models.skills.model import Skill


async def search_skills(
    db: AsyncSession,
    search: Optional[str] = None,
    limit: int = 50
) -> List[Skill]:
    stmt = select(Skill)
    if search:
        stmt = stmt.where(Skill.name.ilike(f"%{search}%"))
    stmt = stmt.order_by(Skill.name.asc()).limit(limit)

    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_or_create_skill(db: AsyncSession, name: str, level: Optional[str] = None) -> Skill:
    """Return the skill whose name matches case-insensitively, creating it otherwise."""
    result = await db.execute(
        select(Skill).where(func.lower(Skill.name) == name.strip().lower())
    )
    skill = result.scalars().first()
    if skill is None:
        skill = Skill(name=name.strip(), level=level)
        db.add(skill)
        await db.flush()
    return skill
