"""
Job endpoints.

Listing and detail are public; writes are restricted to the owning company.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role, User
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.job import JobCreate, JobDto, JobUpdate
from punaboost.services import job_service
from punaboost.services.mapper import job_to_dto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/job", tags=["Jobs"])


@router.get("", response_model=List[JobDto])
def list_jobs(db: Session = Depends(get_db)):
    """Open jobs, newest first."""
    return [job_to_dto(job, include_applications=False) for job in job_service.list_active_jobs(db)]


@router.get("/my-jobs", response_model=List[JobDto])
def list_my_jobs(
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    """All jobs of the authenticated company, expired included, with their applications."""
    return [job_to_dto(job) for job in job_service.list_company_jobs(db, user)]


@router.get("/{job_id}", response_model=JobDto)
def get_job(job_id: int, db: Session = Depends(get_db)):
    return job_to_dto(job_service.get_job(db, job_id), include_applications=False)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=JobDto)
def create_job(
    job_data: JobCreate,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        job = job_service.create_job(db, user, job_data)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create job: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create job"
        )
    return job_to_dto(job)


@router.put("/{job_id}", response_model=MessageResponse)
def update_job(
    job_id: int,
    job_data: JobUpdate,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        job_service.update_job(db, user, job_id, job_data)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update job {job_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update job"
        )
    return MessageResponse(message="Job updated successfully")


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        job_service.delete_job(db, user, job_id)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete job {job_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete job"
        )
    return MessageResponse(message="Job deleted successfully")
