from pydantic import BaseModel
from typing import List, Optional


class ContactInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: Optional[str] = ""
    website: Optional[str] = ""
    location: Optional[str] = ""


class ExperienceEntry(BaseModel):
    title: str
    company: str
    date: str
    start_date: str
    end_date: Optional[str] = None
    description: List[str] = []


class EducationEntry(BaseModel):
    degree: str
    field: str
    institution: str
    date: str
    start_date: str
    end_date: Optional[str] = None


class ResumeAnalysis(BaseModel):
    success: bool
    contact_info: ContactInfo
    summary: str
    skills: List[str] = []
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    suggestions: List[str] = []
    score: int = 0


class ResumeTextRequest(BaseModel):
    raw_text: str
