"""
Pydantic schemas for candidate endpoints.
"""
from typing import List, Optional
from pydantic import Field

from punaboost.schemas.base import CamelModel
from punaboost.schemas.reference import SkillDto


class CandidateDto(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    resume_url: Optional[str] = None
    skills: List[SkillDto] = Field(default_factory=list)


class CandidateUpdate(CamelModel):
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=50)


class CandidateSkillsUpdate(CamelModel):
    skill_ids: List[int] = Field(default_factory=list)


class ResumeUpdateResponse(CamelModel):
    resume_url: str
    message: str
