from sqlalchemy import Column, String, DateTime, Float, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from db.base import Base
from models.skills.model import new_id
from models.matching.scorer import utc_now
from models.candidate.model import JobSeekerProfile
from models.jobs.model import JobPosting

STATUS_APPLIED = "Applied"


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_posting_id", "job_seeker_profile_id", name="uq_application_job_candidate"),
    )

    id = Column(String, primary_key=True, default=new_id)
    job_posting_id = Column(String, ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False)
    job_seeker_profile_id = Column(String, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), nullable=False)
    status = Column(String, nullable=False, default=STATUS_APPLIED)
    applied_at = Column(DateTime, default=utc_now, nullable=False)
    cover_letter = Column(Text)
    match_score = Column(Float)  # snapshot taken when the application is created

    job_posting = relationship(JobPosting)
    job_seeker_profile = relationship(JobSeekerProfile)
