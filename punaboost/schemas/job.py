"""
Pydantic schemas for job endpoints.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import Field, model_validator

from punaboost.schemas.base import CamelModel
from punaboost.schemas.job_application import JobApplicationDto


class JobSkillDto(CamelModel):
    skill_id: int
    skill_name: str = ""


class JobBase(CamelModel):
    """Fields shared by create and update."""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1, max_length=255)
    salary_from: float = Field(..., ge=0)
    salary_to: Optional[float] = Field(None, ge=0)
    is_remote: bool = False
    industry_id: int
    country_id: int
    city_id: int
    expires_at: datetime
    skill_ids: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_salary_range(self):
        if self.salary_to is not None and self.salary_to < self.salary_from:
            raise ValueError("salaryTo must be greater than or equal to salaryFrom")
        return self


class JobCreate(JobBase):
    posted_at: Optional[datetime] = None


class JobUpdate(JobBase):
    pass


class JobDto(CamelModel):
    """Job projection with company, industry and location names flattened."""
    id: int
    title: str
    description: str = ""
    location: str = ""
    salary_from: float
    salary_to: Optional[float] = None
    is_remote: bool = False
    company_id: int
    company_name: Optional[str] = None
    company_logo_url: Optional[str] = None
    industry_id: Optional[int] = None
    industry_name: Optional[str] = None
    country_id: Optional[int] = None
    country_name: Optional[str] = None
    city_id: Optional[int] = None
    city_name: Optional[str] = None
    company_country_name: Optional[str] = None
    company_city_name: Optional[str] = None
    skills: List[JobSkillDto] = Field(default_factory=list)
    applications: List[JobApplicationDto] = Field(default_factory=list)
    posted_at: datetime
    expires_at: Optional[datetime] = None
