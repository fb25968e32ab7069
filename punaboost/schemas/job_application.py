"""
Pydantic schemas for job application endpoints.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field

from punaboost.db.models.job_application import ApplicationStatus
from punaboost.schemas.base import CamelModel


class JobApplicationCreate(CamelModel):
    job_id: int
    resume_id: Optional[int] = None
    notes: Optional[str] = Field(None, max_length=4000)


class JobApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class JobApplicationDto(CamelModel):
    """
    Application projection.

    Candidate and resume fields default to empty strings; the job block is
    only filled for candidate-facing listings.
    """
    id: int
    status: ApplicationStatus
    candidate_id: int
    candidate_first_name: str = ""
    candidate_last_name: str = ""
    candidate_name: str = ""
    candidate_email: str = ""
    candidate_phone_number: str = ""
    candidate_resume_url: str = ""
    resume_id: Optional[int] = None
    resume_name: str = ""
    resume_url: str = ""
    job_id: int
    job_title: str = ""
    applied_at: datetime
    notes: str = ""

    job_description: Optional[str] = None
    job_location: Optional[str] = None
    salary_from: Optional[float] = None
    salary_to: Optional[float] = None
    is_remote: Optional[bool] = None
    company_id: Optional[int] = None
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
    job_posted_at: Optional[datetime] = None
    job_expires_at: Optional[datetime] = None
