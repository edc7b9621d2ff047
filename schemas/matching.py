from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional


class ExperienceInterval(BaseModel):
    start_date: datetime
    end_date: Optional[datetime] = None  # null while the position is current


class MatchScoreRequest(BaseModel):
    candidate_skills: Optional[List[str]] = []
    experiences: Optional[List[ExperienceInterval]] = []
    education_count: Optional[int] = Field(default=0, ge=0)
    required_skills: Optional[List[str]] = []


class MatchScoreResponse(BaseModel):
    match_score: int
    matched_skills: List[str] = []
    missing_skills: List[str] = []
    experience_years: float


class JobRecommendation(BaseModel):
    job_id: str
    title: str
    company: str
    location: Optional[str] = None
    match_score: int
    matched_skills: List[str] = []
    missing_skills: List[str] = []


class CandidateRanking(BaseModel):
    application_id: str
    candidate_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    status: str
    current_position: Optional[str] = None
    match_score: int
    matched_skills: List[str] = []
    missing_skills: List[str] = []
