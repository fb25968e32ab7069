import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from punaboost.core.auth_dependency import get_current_user_obj, get_db, require_role
from punaboost.db.models import Role, User
from punaboost.schemas.base import MessageResponse
from punaboost.schemas.candidate import (
    CandidateDto,
    CandidateSkillsUpdate,
    CandidateUpdate,
    ResumeUpdateResponse,
)
from punaboost.schemas.reference import SkillDto
from punaboost.services import candidate_service
from punaboost.services.mapper import candidate_skill_to_dto, candidate_to_dto

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/candidate", tags=["Candidate"])


@router.get("", response_model=List[CandidateDto])
def list_candidates(
    user: User = Depends(require_role(Role.ADMIN)),
    db: Session = Depends(get_db),
):
    return [candidate_to_dto(candidate) for candidate in candidate_service.list_candidates(db)]


@router.get("/my-profile", response_model=CandidateDto)
def get_my_profile(user: User = Depends(require_role(Role.CANDIDATE))):
    return candidate_to_dto(candidate_service.get_candidate_for_user(user))


@router.post("/skills", response_model=MessageResponse)
def replace_skills(
    data: CandidateSkillsUpdate,
    user: User = Depends(require_role(Role.CANDIDATE)),
    db: Session = Depends(get_db),
):
    try:
        candidate_service.replace_skills(db, user, data.skill_ids)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update candidate skills: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update skills"
        )
    return MessageResponse(message="Skills updated successfully")


@router.get("/skills/{candidate_id}", response_model=List[SkillDto])
def get_candidate_skills(
    candidate_id: int,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db),
):
    candidate = candidate_service.get_candidate(db, candidate_id)
    return [candidate_skill_to_dto(link) for link in candidate.skills]


@router.put("/profile", response_model=CandidateDto)
def update_profile(
    data: CandidateUpdate,
    user: User = Depends(require_role(Role.CANDIDATE)),
    db: Session = Depends(get_db),
):
    try:
        candidate = candidate_service.update_profile(db, user, data)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update candidate profile: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile"
        )
    return candidate_to_dto(candidate)


@router.put("/resume", response_model=ResumeUpdateResponse)
def update_resume(
    file: UploadFile = File(...),
    user: User = Depends(require_role(Role.CANDIDATE)),
    db: Session = Depends(get_db),
):
    try:
        resume_url = candidate_service.update_resume(db, user, file)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update candidate resume: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update resume"
        )
    return ResumeUpdateResponse(resume_url=resume_url, message="Resume updated successfully")


@router.get("/{candidate_id}", response_model=CandidateDto)
def get_candidate(
    candidate_id: int,
    user: User = Depends(get_current_user_obj),
    db: Session = Depends(get_db),
):
    return candidate_to_dto(candidate_service.get_candidate(db, candidate_id))
