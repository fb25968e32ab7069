"""
Job postings: public listing, company-owned CRUD.

Timestamps are stored as naive UTC. Incoming timezone-aware datetimes are
converted to UTC before they reach the database so that expiry comparisons
against datetime.utcnow() stay consistent.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from punaboost.db.models import Job, JobSkill, User
from punaboost.schemas.job import JobBase, JobCreate, JobUpdate
from punaboost.services import reference_service
from punaboost.services.company_service import get_company_for_user
from punaboost.services.mapper import apply_job_update, job_from_create

logger = logging.getLogger(__name__)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def list_active_jobs(db: Session, now: Optional[datetime] = None) -> List[Job]:
    """Jobs that have not expired yet, newest first."""
    now = now or datetime.utcnow()
    return (
        db.query(Job)
        .filter(Job.expires_at >= now)
        .order_by(Job.posted_at.desc())
        .all()
    )


def get_job(db: Session, job_id: int) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


def get_owned_job(db: Session, user: User, job_id: int) -> Job:
    """Job owned by the authenticated company; 403 for someone else's job."""
    company = get_company_for_user(user)
    job = get_job(db, job_id)
    if job.company_id != company.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only manage your own jobs"
        )
    return job


def list_company_jobs(db: Session, user: User) -> List[Job]:
    company = get_company_for_user(user)
    return (
        db.query(Job)
        .filter(Job.company_id == company.id)
        .order_by(Job.posted_at.desc())
        .all()
    )


def _validate_references(db: Session, data: JobBase) -> None:
    reference_service.get_industry(db, data.industry_id)
    reference_service.validate_location(db, data.country_id, data.city_id)


def _link_skills(db: Session, job: Job, skill_ids: List[int]) -> None:
    job.skills = [
        JobSkill(skill_id=skill_id)
        for skill_id in reference_service.existing_skill_ids(db, skill_ids)
    ]


def create_job(db: Session, user: User, data: JobCreate) -> Job:
    company = get_company_for_user(user)
    _validate_references(db, data)

    job = job_from_create(data)
    job.company_id = company.id
    job.expires_at = to_naive_utc(job.expires_at)
    job.posted_at = to_naive_utc(job.posted_at) or datetime.utcnow()
    _link_skills(db, job, data.skill_ids)

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Job created: job_id={job.id}, company_id={company.id}")
    return job


def update_job(db: Session, user: User, job_id: int, data: JobUpdate) -> Job:
    job = get_owned_job(db, user, job_id)
    _validate_references(db, data)

    apply_job_update(job, data)
    job.expires_at = to_naive_utc(job.expires_at)
    _link_skills(db, job, data.skill_ids)

    db.commit()
    db.refresh(job)

    logger.info(f"Job updated: job_id={job.id}, company_id={job.company_id}")
    return job


def delete_job(db: Session, user: User, job_id: int) -> None:
    job = get_owned_job(db, user, job_id)
    company_id = job.company_id
    db.delete(job)
    db.commit()
    logger.info(f"Job deleted: job_id={job_id}, company_id={company_id}")
