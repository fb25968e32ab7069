"""
Projection of ORM entities into transport DTOs.

Related records are flattened into display fields. The projection is
best-effort: a missing parent reference becomes None, a missing nested leaf
becomes an empty string (or 0 for ids), and nothing here raises because a
related row is absent. Reverse mappings copy scalars only; linking relations
is left to the owning service.
"""
from typing import Any, Optional

from punaboost.db.models import (
    Candidate,
    CandidateSkill,
    Company,
    Job,
    JobApplication,
    JobSkill,
    Resume,
)
from punaboost.schemas.candidate import CandidateDto
from punaboost.schemas.company import CompanyDto, CompanyUpdate
from punaboost.schemas.job import JobCreate, JobDto, JobSkillDto, JobUpdate
from punaboost.schemas.job_application import JobApplicationDto
from punaboost.schemas.reference import SkillDto
from punaboost.schemas.resume import ResumeDto


# ============================================
# Per-field resolvers
# ============================================

def attr_of(entity: Any, attr: str, default: Any = None) -> Any:
    """Return entity.attr, or default when the entity itself is missing."""
    if entity is None:
        return default
    return getattr(entity, attr, default)


def name_of(entity: Any, attr: str = "name") -> Optional[str]:
    """Display name of an optional parent reference; None if the reference is absent."""
    return attr_of(entity, attr)


def leaf_name(entity: Any, attr: str = "name") -> str:
    """Display name of a nested leaf reference; empty string if the leaf is absent."""
    value = attr_of(entity, attr)
    return value if value is not None else ""


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def candidate_email(candidate: Optional[Candidate]) -> str:
    return leaf_name(attr_of(candidate, "user"), "email")


# ============================================
# Entity -> DTO
# ============================================

def company_to_dto(company: Company) -> CompanyDto:
    return CompanyDto(
        id=company.id,
        company_name=company.company_name,
        description=company.description,
        logo_url=company.logo_url,
        website=company.website,
        location=company.location,
        founded_year=company.founded_year or 0,
        number_of_employees=company.number_of_employees or 0,
        industry_id=company.industry_id,
        industry_name=name_of(company.industry),
        linked_in=company.linked_in,
        country_id=company.country_id,
        country_name=name_of(company.country),
        city_id=company.city_id,
        city_name=name_of(company.city),
    )


def candidate_skill_to_dto(link: CandidateSkill) -> SkillDto:
    # Dangling skill links project to {0, ""} rather than failing
    return SkillDto(
        id=attr_of(link.skill, "id", 0),
        name=leaf_name(link.skill),
    )


def candidate_to_dto(candidate: Candidate) -> CandidateDto:
    return CandidateDto(
        id=candidate.id,
        first_name=candidate.first_name,
        last_name=candidate.last_name,
        email=attr_of(candidate.user, "email"),
        phone_number=attr_of(candidate.user, "phone_number"),
        resume_url=candidate.resume_url,
        skills=[candidate_skill_to_dto(link) for link in candidate.skills],
    )


def job_skill_to_dto(job_skill: JobSkill) -> JobSkillDto:
    return JobSkillDto(
        skill_id=job_skill.skill_id,
        skill_name=leaf_name(job_skill.skill),
    )


def job_application_to_dto(application: JobApplication, include_job: bool = False) -> JobApplicationDto:
    """
    Project an application.

    Candidate and resume fields fall back to empty strings. With include_job,
    the job's display block (company, industry, location names) is added the
    same way JobDto resolves it.
    """
    candidate = application.candidate
    resume = application.resume
    job = application.job

    dto = JobApplicationDto(
        id=application.id,
        status=application.status,
        candidate_id=application.candidate_id,
        candidate_first_name=leaf_name(candidate, "first_name"),
        candidate_last_name=leaf_name(candidate, "last_name"),
        candidate_name=full_name(attr_of(candidate, "first_name"), attr_of(candidate, "last_name")),
        candidate_email=candidate_email(candidate),
        candidate_phone_number=leaf_name(attr_of(candidate, "user"), "phone_number"),
        candidate_resume_url=leaf_name(candidate, "resume_url"),
        resume_id=application.resume_id,
        resume_name=leaf_name(resume),
        resume_url=leaf_name(resume, "file_url"),
        job_id=application.job_id,
        job_title=leaf_name(job, "title"),
        applied_at=application.applied_at,
        notes=application.notes or "",
    )

    if include_job and job is not None:
        company = job.company
        dto.job_description = job.description
        dto.job_location = job.location
        dto.salary_from = job.salary_from
        dto.salary_to = job.salary_to
        dto.is_remote = job.is_remote
        dto.company_id = job.company_id
        dto.company_name = name_of(company, "company_name")
        dto.company_logo_url = name_of(company, "logo_url")
        dto.industry_id = job.industry_id
        dto.industry_name = name_of(job.industry)
        dto.country_id = job.country_id
        dto.country_name = name_of(job.country)
        dto.city_id = job.city_id
        dto.city_name = name_of(job.city)
        dto.company_country_name = name_of(attr_of(company, "country"))
        dto.company_city_name = name_of(attr_of(company, "city"))
        dto.job_posted_at = job.posted_at
        dto.job_expires_at = job.expires_at

    return dto


def job_to_dto(job: Job, include_applications: bool = True) -> JobDto:
    company = job.company
    applications = []
    if include_applications:
        applications = [job_application_to_dto(application) for application in job.applications]

    return JobDto(
        id=job.id,
        title=job.title,
        description=job.description or "",
        location=job.location or "",
        salary_from=job.salary_from,
        salary_to=job.salary_to,
        is_remote=bool(job.is_remote),
        company_id=job.company_id,
        company_name=name_of(company, "company_name"),
        company_logo_url=name_of(company, "logo_url"),
        industry_id=job.industry_id,
        industry_name=name_of(job.industry),
        country_id=job.country_id,
        country_name=name_of(job.country),
        city_id=job.city_id,
        city_name=name_of(job.city),
        company_country_name=name_of(attr_of(company, "country")),
        company_city_name=name_of(attr_of(company, "city")),
        skills=[job_skill_to_dto(job_skill) for job_skill in job.skills],
        applications=applications,
        posted_at=job.posted_at,
        expires_at=job.expires_at,
    )


def resume_to_dto(resume: Resume) -> ResumeDto:
    return ResumeDto.model_validate(resume)


# ============================================
# DTO -> Entity (scalar copies only)
# ============================================

JOB_SCALAR_FIELDS = (
    "title",
    "description",
    "location",
    "salary_from",
    "salary_to",
    "is_remote",
    "industry_id",
    "country_id",
    "city_id",
    "expires_at",
)

COMPANY_SCALAR_FIELDS = (
    "company_name",
    "description",
    "website",
    "location",
    "founded_year",
    "number_of_employees",
    "industry_id",
    "linked_in",
    "country_id",
    "city_id",
)


def job_from_create(dto: JobCreate) -> Job:
    job = Job(**{field: getattr(dto, field) for field in JOB_SCALAR_FIELDS})
    if dto.posted_at is not None:
        job.posted_at = dto.posted_at
    return job


def apply_job_update(job: Job, dto: JobUpdate) -> Job:
    for field in JOB_SCALAR_FIELDS:
        setattr(job, field, getattr(dto, field))
    return job


def apply_company_update(company: Company, dto: CompanyUpdate) -> Company:
    for field in COMPANY_SCALAR_FIELDS:
        setattr(company, field, getattr(dto, field))
    return company
