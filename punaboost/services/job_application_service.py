import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from punaboost.db.models import ApplicationStatus, Job, JobApplication, Resume, Role, User
from punaboost.schemas.job_application import JobApplicationCreate
from punaboost.services.candidate_service import get_candidate_for_user
from punaboost.services.company_service import get_company_for_user
from punaboost.services.job_service import get_owned_job

logger = logging.getLogger(__name__)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def apply(db: Session, user: User, data: JobApplicationCreate) -> JobApplication:
    """
    Submit an application for the authenticated candidate.

    A candidate may apply once per job; an attached resume must be one of
    the candidate's own.
    """
    candidate = get_candidate_for_user(user)

    existing = (
        db.query(JobApplication)
        .filter(JobApplication.job_id == data.job_id, JobApplication.candidate_id == candidate.id)
        .first()
    )
    if existing:
        raise _bad_request("You have already applied for this job")

    job = db.query(Job).filter(Job.id == data.job_id).first()
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")

    if data.resume_id is not None:
        resume = (
            db.query(Resume)
            .filter(Resume.id == data.resume_id, Resume.candidate_id == candidate.id)
            .first()
        )
        if not resume:
            raise _bad_request("Resume not found or doesn't belong to you")

    application = JobApplication(
        candidate_id=candidate.id,
        job_id=job.id,
        resume_id=data.resume_id,
        status=ApplicationStatus.PENDING,
        notes=data.notes or "",
    )
    db.add(application)
    db.commit()
    db.refresh(application)

    logger.info(f"Application submitted: application_id={application.id}, job_id={job.id}, candidate_id={candidate.id}")
    return application


def list_for_candidate(db: Session, user: User) -> List[JobApplication]:
    candidate = get_candidate_for_user(user)
    return (
        db.query(JobApplication)
        .filter(JobApplication.candidate_id == candidate.id)
        .order_by(JobApplication.applied_at.desc())
        .all()
    )


def list_for_job(db: Session, user: User, job_id: int) -> List[JobApplication]:
    job = get_owned_job(db, user, job_id)
    return (
        db.query(JobApplication)
        .filter(JobApplication.job_id == job.id)
        .order_by(JobApplication.applied_at.desc())
        .all()
    )


def list_for_company(db: Session, user: User) -> List[JobApplication]:
    company = get_company_for_user(user)
    return (
        db.query(JobApplication)
        .join(Job, JobApplication.job_id == Job.id)
        .filter(Job.company_id == company.id)
        .order_by(JobApplication.applied_at.desc())
        .all()
    )


def get_application(db: Session, application_id: int) -> JobApplication:
    application = db.query(JobApplication).filter(JobApplication.id == application_id).first()
    if not application:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return application


def get_visible_application(db: Session, user: User, application_id: int) -> JobApplication:
    """Admins see everything; candidates their own; companies those for their jobs."""
    application = get_application(db, application_id)
    if user.role == Role.ADMIN:
        return application

    if user.role == Role.CANDIDATE:
        allowed = user.candidate_profile is not None and application.candidate_id == user.candidate_profile.id
    else:
        allowed = user.company_profile is not None and application.job.company_id == user.company_profile.id

    if not allowed:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to view this application"
        )
    return application


def update_status(db: Session, user: User, application_id: int, new_status: ApplicationStatus) -> JobApplication:
    application = get_application(db, application_id)
    get_owned_job(db, user, application.job_id)

    old_status = application.status
    application.status = new_status
    db.commit()
    db.refresh(application)

    logger.info(
        f"Application status changed: application_id={application.id}, "
        f"{getattr(old_status, 'value', old_status)} -> {new_status.value}"
    )
    return application
