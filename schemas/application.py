from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ApplicationCreate(BaseModel):
    job_seeker_profile_id: str
    job_posting_id: str
    cover_letter: Optional[str] = None


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    job_posting_id: str
    job_seeker_profile_id: str
    status: str
    applied_at: datetime
    cover_letter: Optional[str] = None
    match_score: Optional[float] = None


class ErrorResponse(BaseModel):
    detail: str
