from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class SkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    level: Optional[str] = None


class SkillList(BaseModel):
    skills: List[SkillOut] = []


class SkillCreate(BaseModel):
    name: str
    level: Optional[str] = None
