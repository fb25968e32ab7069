import logging
from typing import List

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from punaboost.db.models import Candidate, CandidateSkill, User
from punaboost.schemas.candidate import CandidateUpdate
from punaboost.services import file_service, reference_service

logger = logging.getLogger(__name__)

PROFILE_NOT_FOUND = "Candidate profile not found."


def list_candidates(db: Session) -> List[Candidate]:
    return db.query(Candidate).order_by(Candidate.last_name, Candidate.first_name).all()


def get_candidate(db: Session, candidate_id: int) -> Candidate:
    candidate = db.query(Candidate).filter(Candidate.id == candidate_id).first()
    if not candidate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return candidate


def get_candidate_for_user(user: User) -> Candidate:
    """Candidate profile of the authenticated Candidate account."""
    candidate = user.candidate_profile
    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PROFILE_NOT_FOUND)
    return candidate


def replace_skills(db: Session, user: User, skill_ids: List[int]) -> Candidate:
    """
    Replace the candidate's skill set.

    Unknown skill ids are dropped silently; only existing skills are linked.
    """
    candidate = get_candidate_for_user(user)
    valid_ids = reference_service.existing_skill_ids(db, skill_ids)

    candidate.skills = [CandidateSkill(skill_id=skill_id) for skill_id in valid_ids]
    db.commit()
    db.refresh(candidate)

    logger.info(f"Candidate skills replaced: candidate_id={candidate.id}, count={len(valid_ids)}")
    return candidate


def update_profile(db: Session, user: User, data: CandidateUpdate) -> Candidate:
    candidate = get_candidate_for_user(user)

    if data.first_name is not None:
        candidate.first_name = data.first_name.strip()
    if data.last_name is not None:
        candidate.last_name = data.last_name.strip()
    if data.phone_number is not None:
        user.phone_number = data.phone_number.strip() or None

    db.commit()
    db.refresh(candidate)

    logger.info(f"Candidate profile updated: candidate_id={candidate.id}")
    return candidate


def update_resume(db: Session, user: User, file: UploadFile) -> str:
    """Replace the single profile resume and return its URL."""
    candidate = get_candidate_for_user(user)

    new_url = file_service.save_resume(file)
    old_url = candidate.resume_url
    candidate.resume_url = new_url
    db.commit()
    file_service.delete_resume(old_url)

    logger.info(f"Candidate resume updated: candidate_id={candidate.id}")
    return new_url
