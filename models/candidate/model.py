from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from db.base import Base
from models.skills.model import Skill, job_seeker_skills, new_id


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String)
    email = Column(String)
    phone = Column(String)
    title = Column(String)
    bio = Column(Text)

    skills = relationship(Skill, secondary=job_seeker_skills)
    experiences = relationship("Experience", cascade="all, delete-orphan")
    educations = relationship("Education", cascade="all, delete-orphan")


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(String, primary_key=True, default=new_id)
    job_seeker_profile_id = Column(String, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), nullable=False)
    company = Column(String, nullable=False)
    position = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)  # null while the position is current
    current = Column(Boolean, default=False, nullable=False)
    description = Column(Text)


class Education(Base):
    __tablename__ = "educations"

    id = Column(String, primary_key=True, default=new_id)
    job_seeker_profile_id = Column(String, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), nullable=False)
    institution = Column(String, nullable=False)
    degree = Column(String, nullable=False)
    field = Column(String)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime)
    current = Column(Boolean, default=False, nullable=False)
    description = Column(Text)
