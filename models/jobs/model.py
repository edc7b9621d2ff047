from sqlalchemy import Column, String, Boolean, DateTime, Text
from sqlalchemy.orm import relationship

from db.base import Base
from models.skills.model import Skill, job_posting_skills, new_id
from models.matching.scorer import utc_now


class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(String, primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String)
    type = Column(String, nullable=False, default="Full-time")
    description = Column(Text, nullable=False, default="")
    requirements = Column(Text)
    salary = Column(String)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    required_skills = relationship(Skill, secondary=job_posting_skills)
