from uuid import uuid4

from sqlalchemy import Column, String, Table, ForeignKey

from db.base import Base


def new_id() -> str:
    return str(uuid4())


class Skill(Base):
    __tablename__ = "skills"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    level = Column(String)


job_seeker_skills = Table(
    "job_seeker_skills",
    Base.metadata,
    Column("job_seeker_profile_id", String, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)

job_posting_skills = Table(
    "job_posting_skills",
    Base.metadata,
    Column("job_posting_id", String, ForeignKey("job_postings.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", String, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)
