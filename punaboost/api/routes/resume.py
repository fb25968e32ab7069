"""
Resume library endpoints (Candidate only).
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_db, require_role
from punaboost.db.models import Role, User
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.resume import ResumeDto
from punaboost.services import resume_service
from punaboost.services.mapper import resume_to_dto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["Resume"])

candidate_only = require_role(Role.CANDIDATE)


@router.get("/my-resumes", response_model=List[ResumeDto])
def list_my_resumes(user: User = Depends(candidate_only), db: Session = Depends(get_db)):
    return [resume_to_dto(resume) for resume in resume_service.list_resumes(db, user)]


@router.get("/{resume_id}", response_model=ResumeDto)
def get_resume(resume_id: int, user: User = Depends(candidate_only), db: Session = Depends(get_db)):
    return resume_to_dto(resume_service.get_resume(db, user, resume_id))


@router.post("", response_model=ResumeDto)
def create_resume(
    file: Optional[UploadFile] = File(None),
    name: Optional[str] = Form(None),
    is_default: bool = Form(False, alias="isDefault"),
    user: User = Depends(candidate_only),
    db: Session = Depends(get_db),
):
    try:
        resume = resume_service.create_resume(db, user, file, name=name, is_default=is_default)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to upload resume: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload resume"
        )
    return resume_to_dto(resume)


@router.delete("/{resume_id}", response_model=MessageResponse)
def delete_resume(resume_id: int, user: User = Depends(candidate_only), db: Session = Depends(get_db)):
    try:
        resume_service.delete_resume(db, user, resume_id)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete resume {resume_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete resume"
        )
    return MessageResponse(message="Resume deleted successfully")


@router.put("/{resume_id}/set-default", response_model=ResumeDto)
def set_default_resume(resume_id: int, user: User = Depends(candidate_only), db: Session = Depends(get_db)):
    try:
        resume = resume_service.set_default(db, user, resume_id)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to set default resume {resume_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to set default resume"
        )
    return resume_to_dto(resume)
