"""
Projection of entities into DTOs, including partially loaded graphs.
"""
from datetime import datetime, timedelta

from punaboost.db.models import (
    ApplicationStatus,
    Candidate,
    CandidateSkill,
    City,
    Company,
    Country,
    Industry,
    Job,
    JobApplication,
    JobSkill,
    Resume,
    Skill,
    User,
)
from punaboost.schemas.company import CompanyUpdate
from punaboost.schemas.job import JobCreate, JobUpdate
from punaboost.services.mapper import (
    apply_company_update,
    apply_job_update,
    candidate_to_dto,
    company_to_dto,
    full_name,
    job_application_to_dto,
    job_from_create,
    job_to_dto,
)

POSTED = datetime(2025, 3, 1, 9, 0)
EXPIRES = datetime(2025, 4, 1, 0, 0)


def _job(**fields) -> Job:
    values = dict(
        id=7,
        title="Data Analyst",
        description="SQL and dashboards",
        location="Tirana",
        salary_from=900.0,
        salary_to=None,
        is_remote=True,
        company_id=3,
        posted_at=POSTED,
        expires_at=EXPIRES,
    )
    values.update(fields)
    return Job(**values)


def _application(**fields) -> JobApplication:
    values = dict(
        id=11,
        status=ApplicationStatus.PENDING,
        candidate_id=5,
        job_id=7,
        applied_at=POSTED,
        notes="",
    )
    values.update(fields)
    return JobApplication(**values)


def test_job_without_company_has_null_company_fields():
    dto = job_to_dto(_job())

    assert dto.company_name is None
    assert dto.company_logo_url is None
    assert dto.company_country_name is None
    assert dto.company_city_name is None
    assert dto.industry_name is None
    assert dto.country_name is None
    assert dto.city_name is None


def test_job_flattens_related_names():
    albania = Country(id=1, name="Albania", code="AL")
    tirana = City(id=2, name="Tirana", country_id=1)
    company = Company(id=3, company_name="Acme", logo_url="/uploads/logos/a.png", country=albania, city=tirana)
    job = _job(company=company, industry=Industry(id=4, name="Banka"), country=albania, city=tirana)

    data = job_to_dto(job).model_dump(by_alias=True)

    assert data["companyName"] == "Acme"
    assert data["companyLogoUrl"] == "/uploads/logos/a.png"
    assert data["industryName"] == "Banka"
    assert data["countryName"] == "Albania"
    assert data["cityName"] == "Tirana"
    assert data["companyCountryName"] == "Albania"
    assert data["companyCityName"] == "Tirana"
    assert data["isRemote"] is True
    assert data["salaryTo"] is None


def test_company_without_country_keeps_company_fields():
    company = Company(id=3, company_name="Acme", city=City(id=2, name="Tirana", country_id=1))
    dto = job_to_dto(_job(company=company))

    assert dto.company_name == "Acme"
    assert dto.company_country_name is None
    assert dto.company_city_name == "Tirana"


def test_job_skill_without_skill_has_empty_name():
    job = _job(skills=[JobSkill(skill_id=99), JobSkill(skill_id=1, skill=Skill(id=1, name="Python"))])

    skills = job_to_dto(job).skills

    assert [(s.skill_id, s.skill_name) for s in skills] == [(99, ""), (1, "Python")]


def test_job_applications_are_optional():
    job = _job(applications=[_application()])

    assert len(job_to_dto(job).applications) == 1
    assert job_to_dto(job, include_applications=False).applications == []


def test_application_without_related_records_uses_empty_strings():
    dto = job_application_to_dto(_application())

    assert dto.candidate_first_name == ""
    assert dto.candidate_last_name == ""
    assert dto.candidate_name == ""
    assert dto.candidate_email == ""
    assert dto.candidate_phone_number == ""
    assert dto.candidate_resume_url == ""
    assert dto.resume_name == ""
    assert dto.resume_url == ""
    assert dto.job_title == ""


def test_application_full_name_and_resume():
    candidate = Candidate(id=5, first_name="Ana", last_name="Hoxha", user=User(email="ana@mail.al", phone_number=None))
    resume = Resume(id=2, name="Main CV", file_url="/uploads/resumes/cv.pdf")
    dto = job_application_to_dto(_application(candidate=candidate, resume=resume, resume_id=2))

    assert dto.candidate_name == "Ana Hoxha"
    assert dto.candidate_email == "ana@mail.al"
    assert dto.candidate_phone_number == ""
    assert dto.resume_name == "Main CV"
    assert dto.resume_url == "/uploads/resumes/cv.pdf"


def test_application_job_block_only_when_requested():
    job = _job(company=Company(id=3, company_name="Acme"))
    application = _application(job=job)

    plain = job_application_to_dto(application)
    detailed = job_application_to_dto(application, include_job=True)

    assert plain.job_title == "Data Analyst"
    assert plain.company_name is None
    assert detailed.company_name == "Acme"
    assert detailed.job_expires_at == EXPIRES
    assert detailed.is_remote is True


def test_application_job_block_with_missing_company():
    detailed = job_application_to_dto(_application(job=_job()), include_job=True)

    assert detailed.company_name is None
    assert detailed.company_logo_url is None
    assert detailed.job_description == "SQL and dashboards"


def test_full_name_trims_missing_parts():
    assert full_name("Ana", None) == "Ana"
    assert full_name(None, None) == ""


def test_candidate_without_user_has_null_contact_fields():
    candidate = Candidate(id=5, first_name="Ana", last_name="Hoxha")

    dto = candidate_to_dto(candidate)

    assert dto.email is None
    assert dto.phone_number is None
    assert dto.skills == []


def test_candidate_skill_without_skill_projects_to_placeholder():
    candidate = Candidate(
        id=5,
        first_name="Ana",
        last_name="Hoxha",
        skills=[CandidateSkill(skill_id=8), CandidateSkill(skill_id=1, skill=Skill(id=1, name="SQL"))],
    )

    skills = candidate_to_dto(candidate).skills

    assert [(s.id, s.name) for s in skills] == [(0, ""), (1, "SQL")]


def test_company_dto_names():
    company = Company(id=1, company_name="Acme", industry=Industry(id=2, name="Banka"), founded_year=None)

    dto = company_to_dto(company)

    assert dto.industry_name == "Banka"
    assert dto.country_name is None
    assert dto.founded_year == 0


def _job_payload(**fields):
    payload = dict(
        title="QA Engineer",
        description="Testing",
        location="Durrës",
        salary_from=700,
        salary_to=900,
        is_remote=False,
        industry_id=1,
        country_id=1,
        city_id=2,
        expires_at=EXPIRES,
        skill_ids=[1, 2],
    )
    payload.update(fields)
    return payload


def test_job_from_create_copies_scalars_only():
    job = job_from_create(JobCreate(**_job_payload()))

    assert job.title == "QA Engineer"
    assert job.city_id == 2
    assert job.company_id is None
    assert job.skills == []


def test_apply_job_update_keeps_identity_and_owner():
    job = _job()

    apply_job_update(job, JobUpdate(**_job_payload(expires_at=EXPIRES + timedelta(days=5))))

    assert job.id == 7
    assert job.company_id == 3
    assert job.title == "QA Engineer"
    assert job.expires_at == EXPIRES + timedelta(days=5)


def test_apply_company_update_does_not_touch_logo_or_owner():
    company = Company(id=1, user_id=4, company_name="Old", logo_url="/uploads/logos/x.png")

    apply_company_update(company, CompanyUpdate(company_name="New", website="https://new.al"))

    assert company.company_name == "New"
    assert company.website == "https://new.al"
    assert company.logo_url == "/uploads/logos/x.png"
    assert company.user_id == 4
