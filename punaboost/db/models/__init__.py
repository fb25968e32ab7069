"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.

All models must be imported here to be included in database migrations and table creation.
"""
from punaboost.db.models.user import User, Role
from punaboost.db.models.country import Country
from punaboost.db.models.city import City
from punaboost.db.models.industry import Industry, DEFAULT_INDUSTRIES
from punaboost.db.models.skill import Skill
from punaboost.db.models.company import Company
from punaboost.db.models.candidate import Candidate, CandidateSkill
from punaboost.db.models.job import Job, JobSkill
from punaboost.db.models.job_application import JobApplication, ApplicationStatus
from punaboost.db.models.resume import Resume

__all__ = [
    "User",
    "Role",
    "Country",
    "City",
    "Industry",
    "DEFAULT_INDUSTRIES",
    "Skill",
    "Company",
    "Candidate",
    "CandidateSkill",
    "Job",
    "JobSkill",
    "JobApplication",
    "ApplicationStatus",
    "Resume",
]
