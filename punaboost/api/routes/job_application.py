import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_current_user_obj, get_db, require_role
from punaboost.db.models import Role, User
from punaboost.schemas.job_application import (
    JobApplicationCreate,
    JobApplicationDto,
    JobApplicationStatusUpdate,
)
from punaboost.services import job_application_service
from punaboost.services.mapper import job_application_to_dto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobapplication", tags=["Job Applications"])


@router.post("/apply", status_code=status.HTTP_201_CREATED, response_model=JobApplicationDto)
def apply(
    data: JobApplicationCreate,
    user: User = Depends(require_role(Role.CANDIDATE)),
    db: Session = Depends(get_db),
):
    try:
        application = job_application_service.apply(db, user, data)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to submit application for job {data.job_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit application"
        )
    return job_application_to_dto(application)


@router.get("/my-applications", response_model=List[JobApplicationDto])
def list_my_applications(
    user: User = Depends(require_role(Role.CANDIDATE)),
    db: Session = Depends(get_db),
):
    applications = job_application_service.list_for_candidate(db, user)
    return [job_application_to_dto(application, include_job=True) for application in applications]


@router.get("/job/{job_id}", response_model=List[JobApplicationDto])
def list_job_applications(
    job_id: int,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    applications = job_application_service.list_for_job(db, user, job_id)
    return [job_application_to_dto(application, include_job=True) for application in applications]


@router.get("/company/all", response_model=List[JobApplicationDto])
def list_company_applications(
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    applications = job_application_service.list_for_company(db, user)
    return [job_application_to_dto(application, include_job=True) for application in applications]


@router.put("/{application_id}/status", response_model=JobApplicationDto)
def update_status(
    application_id: int,
    data: JobApplicationStatusUpdate,
    user: User = Depends(require_role(Role.COMPANY)),
    db: Session = Depends(get_db),
):
    try:
        application = job_application_service.update_status(db, user, application_id, data.status)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update application {application_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application status"
        )
    return job_application_to_dto(application)


@router.get("/{application_id}", response_model=JobApplicationDto)
def get_application(
    application_id: int,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db),
):
    application = job_application_service.get_visible_application(db, user, application_id)
    return job_application_to_dto(application, include_job=True)
